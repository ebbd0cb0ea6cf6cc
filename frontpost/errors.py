"""Errores de validación de contenido.

Todos son recuperables por quien llama: el parser lanza el primero que
encuentra y el loader decide si se salta el archivo o se aborta el lote.
"""


class ContentError(Exception):
    """Base para cualquier archivo de contenido que no se puede convertir en Post."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class MalformedContentError(ContentError):
    """Delimitadores ausentes o una línea de metadatos que no es `key: value`."""

    def __init__(self, path, reason, line=None):
        self.line = line
        if line is not None:
            reason = f"línea {line}: {reason}"
        super().__init__(path, reason)


class MissingFieldError(ContentError):
    """Falta un campo obligatorio (title, date, layout) o está vacío."""

    def __init__(self, path, field):
        self.field = field
        super().__init__(path, f"falta el campo obligatorio '{field}'")


class InvalidDateError(ContentError):
    def __init__(self, path, value):
        self.value = value
        super().__init__(path, f"fecha inválida '{value}'")
