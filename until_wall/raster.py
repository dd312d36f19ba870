"""Paints vector documents with cairo.

Output is a PNG, a PDF, or a directory of numbered PNG frames for an external
video encoder.
"""

import io
import logging
import math
import re
from collections.abc import Iterable
from pathlib import Path

try:
    import cairo
except ModuleNotFoundError:  # pragma: no cover - fallback when pycairo isn't available
    import cairocffi as cairo  # type: ignore[no-redef]

from PIL import ImageColor

from until_wall.shapes import Circle, IconPath, Primitive, Rect, TextRun, VectorDocument

logger = logging.getLogger(__name__)

FRAME_FILENAME: str = "frame_{:03d}.png"
SHADOW_OFFSET: float = 2.0
SHADOW_RGBA: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.3)
BOLD_WEIGHTS: frozenset[str] = frozenset({"bold", "bolder", "600", "700", "800", "900"})

_PATH_TOKEN = re.compile(r"[A-Za-z]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_PATH_ARG_COUNTS: dict[str, int] = {"M": 2, "L": 2, "H": 1, "V": 1, "C": 6, "S": 4, "Z": 0}


def parse_color(color: str) -> tuple[float, float, float]:
    """Any CSS color Pillow understands (hex, names, ``rgb()``, ``hsl()``), alpha dropped."""
    try:
        rgb = ImageColor.getrgb(color.strip())
    except ValueError:
        raise ValueError(f"Unsupported color {color!r}: use a CSS color name or #rrggbb") from None
    red, green, blue = (channel / 255 for channel in rgb[:3])
    return red, green, blue


def parse_path(data: str) -> list[tuple[str, tuple[float, ...]]]:
    """Splits SVG path data into ``(command, args)`` segments.

    Implicit repetitions are expanded, a moveto followed by extra coordinate
    pairs continues as lineto.
    """
    tokens: list[str] = _PATH_TOKEN.findall(data)
    segments: list[tuple[str, tuple[float, ...]]] = []
    command: str | None = None
    i = 0

    while i < len(tokens):
        token = tokens[i]
        if token.isalpha():
            if token.upper() not in _PATH_ARG_COUNTS:
                raise ValueError(f"Unsupported path command {token!r}")
            command = token
            i += 1
            if command in {"Z", "z"}:
                segments.append((command, ()))
                continue
        elif command is None or command in {"Z", "z"}:
            raise ValueError(f"Path data has a number without a command at {token!r}")

        count = _PATH_ARG_COUNTS[command.upper()]
        args = tokens[i : i + count]
        if len(args) < count or any(arg.isalpha() for arg in args):
            raise ValueError(f"Path command {command!r} expects {count} numbers")
        segments.append((command, tuple(float(arg) for arg in args)))
        i += count

        if command == "M":
            command = "L"
        elif command == "m":
            command = "l"

    return segments


def trace_path(ctx: "cairo.Context", data: str) -> None:
    pos_x = pos_y = 0.0
    start_x = start_y = 0.0
    # Second control point of the previous curve, reflected by S/s
    last_ctrl: tuple[float, float] | None = None

    for command, args in parse_path(data):
        op = command.upper()
        dx, dy = (pos_x, pos_y) if command.islower() else (0.0, 0.0)

        if op == "Z":
            ctx.close_path()
            pos_x, pos_y = start_x, start_y
            last_ctrl = None
        elif op == "M":
            pos_x, pos_y = args[0] + dx, args[1] + dy
            start_x, start_y = pos_x, pos_y
            ctx.move_to(pos_x, pos_y)
            last_ctrl = None
        elif op == "L":
            pos_x, pos_y = args[0] + dx, args[1] + dy
            ctx.line_to(pos_x, pos_y)
            last_ctrl = None
        elif op == "H":
            pos_x = args[0] + dx
            ctx.line_to(pos_x, pos_y)
            last_ctrl = None
        elif op == "V":
            pos_y = args[0] + dy
            ctx.line_to(pos_x, pos_y)
            last_ctrl = None
        else:
            if op == "C":
                x1, y1 = args[0] + dx, args[1] + dy
                x2, y2, x3, y3 = args[2] + dx, args[3] + dy, args[4] + dx, args[5] + dy
            else:
                if last_ctrl is None:
                    x1, y1 = pos_x, pos_y
                else:
                    x1, y1 = 2 * pos_x - last_ctrl[0], 2 * pos_y - last_ctrl[1]
                x2, y2, x3, y3 = args[0] + dx, args[1] + dy, args[2] + dx, args[3] + dy
            ctx.curve_to(x1, y1, x2, y2, x3, y3)
            last_ctrl = (x2, y2)
            pos_x, pos_y = x3, y3


def font_face(font_family: str) -> str:
    # The toy font API takes a single family, the generic fallback resolves everywhere
    families = [name.strip().strip("'\"") for name in font_family.split(",")]
    return families[-1] if families and families[-1] else "sans-serif"


class DocumentPainter:
    def __init__(self, surface: "cairo.Surface") -> None:
        self.SURFACE = surface
        self.CTX: cairo.Context = cairo.Context(surface)

    def text_advance(self, text: str) -> float:
        _, _, _, _, x_advance, _ = self.CTX.text_extents(text)
        return x_advance

    def draw_rect(self, rect: Rect) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return
        self.CTX.set_source_rgb(*parse_color(rect.fill))
        self.CTX.rectangle(rect.x, rect.y, rect.width, rect.height)
        self.CTX.fill()

    def draw_circle(self, circle: Circle) -> None:
        if circle.r <= 0 and not circle.stroke_width:
            return
        self.CTX.new_sub_path()
        self.CTX.arc(circle.cx, circle.cy, max(0.0, circle.r), 0, 2 * math.pi)
        self.CTX.set_source_rgb(*parse_color(circle.fill))
        if circle.stroke is None or not circle.stroke_width:
            self.CTX.fill()
            return
        self.CTX.fill_preserve()
        self.CTX.set_line_width(circle.stroke_width)
        self.CTX.set_source_rgb(*parse_color(circle.stroke))
        self.CTX.stroke()

    def draw_icon(self, icon: IconPath) -> None:
        view_w, view_h = icon.view_box
        if icon.size <= 0 or view_w <= 0 or view_h <= 0:
            return
        # Uniform fit centred in the square, like preserveAspectRatio="xMidYMid meet"
        scale = min(icon.size / view_w, icon.size / view_h)
        self.CTX.save()
        self.CTX.translate(
            icon.x + (icon.size - view_w * scale) / 2,
            icon.y + (icon.size - view_h * scale) / 2,
        )
        self.CTX.scale(scale, scale)
        self.CTX.new_path()
        trace_path(self.CTX, icon.path)
        self.CTX.restore()
        self.CTX.set_source_rgb(*parse_color(icon.fill))
        self.CTX.fill()

    def draw_text(self, run: TextRun) -> None:
        bold = run.font_weight in BOLD_WEIGHTS
        weight = cairo.FONT_WEIGHT_BOLD if bold else cairo.FONT_WEIGHT_NORMAL
        self.CTX.select_font_face(font_face(run.font_family), cairo.FONT_SLANT_NORMAL, weight)
        self.CTX.set_font_size(run.font_size)

        advances = [self.text_advance(span.text) for span in run.spans]
        start_x = run.x - sum(advances) / 2

        if run.shadow:
            self.CTX.set_source_rgba(*SHADOW_RGBA)
            self.CTX.move_to(start_x + SHADOW_OFFSET, run.y + SHADOW_OFFSET)
            self.CTX.show_text(run.text)

        pos_x = start_x
        for span, advance in zip(run.spans, advances, strict=True):
            self.CTX.set_source_rgb(*parse_color(span.fill))
            self.CTX.move_to(pos_x, run.y)
            self.CTX.show_text(span.text)
            pos_x += advance

    def draw(self, primitive: Primitive) -> None:
        if isinstance(primitive, Rect):
            self.draw_rect(primitive)
        elif isinstance(primitive, Circle):
            self.draw_circle(primitive)
        elif isinstance(primitive, IconPath):
            self.draw_icon(primitive)
        else:
            self.draw_text(primitive)

    def paint(self, document: VectorDocument) -> None:
        for primitive in document.primitives:
            self.draw(primitive)


def _surface_size(document: VectorDocument) -> tuple[int, int]:
    return max(1, document.width), max(1, document.height)


def to_png(document: VectorDocument) -> bytes:
    surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, *_surface_size(document))
    DocumentPainter(surface).paint(document)
    buffer = io.BytesIO()
    surface.write_to_png(buffer)
    surface.finish()
    return buffer.getvalue()


def write_png(document: VectorDocument, filename: str | Path) -> Path:
    path = Path(filename)
    path.write_bytes(to_png(document))
    return path


def write_pdf(document: VectorDocument, filename: str | Path) -> Path:
    path = Path(filename)
    surface = cairo.PDFSurface(str(path), *_surface_size(document))
    painter = DocumentPainter(surface)
    painter.paint(document)
    painter.CTX.show_page()
    surface.finish()
    return path


def write_frames(documents: Iterable[VectorDocument], directory: str | Path) -> list[Path]:
    """Writes ``frame_000.png``, ``frame_001.png``... into ``directory``."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    paths = [
        write_png(document, directory / FRAME_FILENAME.format(index))
        for index, document in enumerate(documents)
    ]
    logger.debug("Wrote %d frames to %s", len(paths), directory)
    return paths
