"""In-memory vector document model.

All coordinates are absolute canvas pixels. Every primitive is immutable, a
resized marker is a new primitive built with :meth:`scaled`.
"""

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: str
    stroke: str | None = None
    stroke_width: float | None = None

    def scaled(self, factor: float) -> "Circle":
        return dataclasses.replace(self, r=max(0.0, self.r * factor))


@dataclass(frozen=True)
class IconPath:
    """A path glyph drawn into the square ``(x, y, size, size)``."""

    x: float
    y: float
    size: float
    path: str
    view_box: tuple[float, float]
    fill: str

    def scaled(self, factor: float) -> "IconPath":
        size = max(0.0, self.size * factor)
        shift = (self.size - size) / 2
        return dataclasses.replace(self, x=self.x + shift, y=self.y + shift, size=size)


@dataclass(frozen=True)
class TextSpan:
    text: str
    fill: str


@dataclass(frozen=True)
class TextRun:
    # Baseline anchor point, text is centred on x
    x: float
    y: float
    spans: tuple[TextSpan, ...]
    font_size: float
    font_family: str
    font_weight: str = "normal"
    shadow: bool = False

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)


Primitive = Rect | Circle | IconPath | TextRun
Marker = Circle | IconPath


@dataclass(frozen=True)
class VectorDocument:
    width: int
    height: int
    background: str
    primitives: tuple[Primitive, ...]
    # Index into ``primitives`` of the current day's marker
    current_marker: int | None = None

    @property
    def markers(self) -> list[Marker]:
        return [p for p in self.primitives if isinstance(p, Circle | IconPath)]

    @property
    def texts(self) -> list[TextRun]:
        return [p for p in self.primitives if isinstance(p, TextRun)]

    def with_current_marker_scaled(self, factor: float) -> "VectorDocument":
        if self.current_marker is None:
            return self
        primitives = list(self.primitives)
        primitives[self.current_marker] = primitives[self.current_marker].scaled(factor)
        return dataclasses.replace(self, primitives=tuple(primitives))
