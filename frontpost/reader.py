from pathlib import Path

CONTENT_SUFFIXES = ('.md', '.markdown')


class ContentReader:
    """Lee archivos de contenido de un directorio local.

    Los errores de E/S (archivo inexistente, permisos) se propagan tal cual.
    """

    def __init__(self, content_dir):
        self.content_dir = Path(content_dir)

    def list_files(self):
        """Rutas de todos los archivos de contenido, recursivo y ordenado."""
        if not self.content_dir.is_dir():
            raise FileNotFoundError(f"No se encontró el directorio de contenido: {self.content_dir}")
        return sorted(
            p for p in self.content_dir.rglob('*')
            if p.is_file() and p.suffix.lower() in CONTENT_SUFFIXES
        )

    def read(self, path):
        # utf-8-sig descarta el BOM que añaden algunos editores
        return Path(path).read_text(encoding='utf-8-sig')
