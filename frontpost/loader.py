from frontpost.errors import ContentError
from frontpost.logger import logger


def load_posts(reader, parser, strict=False):
    """Lee y parsea todos los archivos de contenido.

    Devuelve pares (ruta, Post) ordenados por fecha, el más reciente primero.
    Con `strict` el primer ContentError aborta el lote; si no, el archivo se
    salta con un warning. Los errores de E/S siempre se propagan.
    """
    posts = []

    for path in reader.list_files():
        raw_md = reader.read(path)
        try:
            post = parser.parse(raw_md, path)
        except ContentError as e:
            if strict:
                raise
            logger.warning(f"Error parseando {path}, se omite: {e.reason}")
            continue
        posts.append((path, post))

    posts.sort(key=lambda item: item[1].date, reverse=True)
    return posts
