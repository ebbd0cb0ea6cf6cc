from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Post:
    """Un archivo de contenido ya parseado. Inmutable.

    `title`, `date` y `layout` son obligatorios: un Post inválido no se
    puede construir (ValueError).
    """

    title: str
    date: date
    layout: str
    background: Optional[str] = None
    body: str = ""
    extra: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("title", "layout"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"El campo '{name}' no puede estar vacío")
        if not isinstance(self.date, date):
            raise ValueError(f"'date' debe ser una fecha, no {self.date!r}")
        if not self.background:
            object.__setattr__(self, "background", None)
        # Metadatos extra de solo lectura
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def __hash__(self):
        return hash((self.title, self.date, self.layout, self.background,
                     self.body, tuple(self.extra.items())))

    @property
    def metadata(self):
        """Todos los metadatos en el orden en que se escriben en el front matter."""
        meta = {
            "layout": self.layout,
            "title": self.title,
            "date": self.date.isoformat(),
        }
        if self.background is not None:
            meta["background"] = self.background
        meta.update(self.extra)
        return meta
