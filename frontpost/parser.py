import re
from datetime import datetime

import frontmatter
from frontmatter.default_handlers import BaseHandler

from frontpost.errors import InvalidDateError, MalformedContentError, MissingFieldError
from frontpost.post import Post

REQUIRED_FIELDS = ("title", "date", "layout")

# El primero es el formato canónico (el que escribe dumps); el resto son las
# marcas de tiempo estilo Jekyll.
DEFAULT_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
)

_KEY = r"[A-Za-z0-9_][A-Za-z0-9_-]*"
_LINE_RE = re.compile(rf"^(?P<key>{_KEY})[ \t]*:(?:[ \t]+(?P<value>.*))?$")
_KEY_RE = re.compile(rf"^{_KEY}$")
_LEADING_BLANK_RE = re.compile(r"\A(?:[ \t]*\r?\n)+")


class MetadataSyntaxError(ValueError):
    def __init__(self, reason, line):
        self.reason = reason
        self.line = line
        super().__init__(f"línea {line}: {reason}")


def _unquote(value):
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _trim_blank_lines(text):
    # Solo líneas en blanco: la sangría de la primera línea es parte del markup
    return _LEADING_BLANK_RE.sub("", text).rstrip()


def _quote(value):
    if value != value.strip() or _unquote(value) != value:
        return f'"{value}"'
    return value


class KeyValueHandler(BaseHandler):
    """Front matter de pares `key: value`, una por línea, entre líneas `---`.

    Es un subconjunto plano de YAML: no hay listas, anidamiento ni tipos;
    todos los valores son texto.
    """

    FM_BOUNDARY = re.compile(r"^-{3}[ \t]*\r?$", re.MULTILINE)
    START_DELIMITER = END_DELIMITER = "---"

    def detect(self, text):
        return bool(self.FM_BOUNDARY.match(text))

    def split(self, text):
        parts = self.FM_BOUNDARY.split(text, 2)
        if len(parts) < 3:
            raise ValueError("no se encontró el delimitador de cierre")
        _, fm, content = parts
        return fm, content

    def load(self, fm):
        # fm empieza con el salto de la línea del delimitador, así que el
        # índice coincide con el número de línea menos uno.
        metadata = {}
        for index, raw in enumerate(fm.split("\n")):
            line = raw.rstrip("\r")
            if not line.strip():
                continue
            match = _LINE_RE.match(line)
            if match is None:
                raise MetadataSyntaxError(f"se esperaba 'key: value', se encontró {line!r}", index + 1)
            key = match.group("key")
            if key in metadata:
                raise MetadataSyntaxError(f"clave duplicada '{key}'", index + 1)
            metadata[key] = _unquote((match.group("value") or "").strip())
        return metadata

    def export(self, metadata, **kwargs):
        lines = []
        for key, value in metadata.items():
            value = str(value)
            if not _KEY_RE.match(key):
                raise ValueError(f"clave de metadatos inválida {key!r}")
            if "\n" in value or "\r" in value:
                raise ValueError(f"el valor de '{key}' ocupa varias líneas")
            lines.append(f"{key}: {_quote(value)}")
        return "\n".join(lines)


class ContentParser:
    def __init__(self, date_formats=DEFAULT_DATE_FORMATS):
        self.handler = KeyValueHandler()
        self.date_formats = tuple(date_formats)

    def parse(self, raw_md, path):
        """Convierte el texto completo de un archivo en un Post.

        `path` solo se usa en los mensajes de error. Lanza el primer error
        encontrado: MalformedContentError, MissingFieldError o InvalidDateError.
        """
        if not self.handler.detect(raw_md):
            raise MalformedContentError(path, "el contenido debe empezar con una línea '---'", line=1)
        try:
            fm, content = self.handler.split(raw_md)
        except ValueError:
            raise MalformedContentError(path, "no se encontró el delimitador '---' de cierre") from None
        try:
            metadata = self.handler.load(fm)
        except MetadataSyntaxError as e:
            raise MalformedContentError(path, e.reason, line=e.line) from None

        for name in REQUIRED_FIELDS:
            if not metadata.get(name, "").strip():
                raise MissingFieldError(path, name)

        post_date = self.parse_date(metadata.pop("date"), path)
        title = metadata.pop("title")
        layout = metadata.pop("layout")
        background = metadata.pop("background", None) or None

        return Post(
            title=title,
            date=post_date,
            layout=layout,
            background=background,
            body=_trim_blank_lines(content),
            extra=metadata,
        )

    def parse_date(self, value, path):
        for fmt in self.date_formats:
            try:
                return datetime.strptime(value, fmt).date()
            except ValueError:
                continue
        raise InvalidDateError(path, value)


def dumps(post):
    """Serializa un Post de vuelta al formato de front matter."""
    fm_post = frontmatter.Post(post.body)
    fm_post.metadata.update(post.metadata)
    return frontmatter.dumps(fm_post, handler=KeyValueHandler())
