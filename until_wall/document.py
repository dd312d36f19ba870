import logging
from xml.sax.saxutils import escape

from until_wall.dates import DayCounts, DayState
from until_wall.geometry import GridPlan, layout_cells
from until_wall.markers import render_marker, resolve_style
from until_wall.request import ProgressMode, RenderRequest
from until_wall.shapes import Circle, IconPath, Primitive, Rect, TextRun, TextSpan, VectorDocument

logger = logging.getLogger(__name__)

GOAL_FONT_FAMILY: str = "'Comic Sans MS', 'Chalkboard SE', 'Marker Felt', 'Fantasy', cursive"
PROGRESS_FONT_FAMILY: str = (
    "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
)
PERCENTAGE_COLOR: str = "#999999"


def progress_label(request: RenderRequest, counts: DayCounts) -> tuple[str, str]:
    if request.progress_mode is ProgressMode.ELAPSED:
        return f"{counts.elapsed_days}d elapsed", f" {counts.percentage}%"
    return f"{counts.days_remaining}d until", f" {counts.percentage}%"


def compose(request: RenderRequest, grid: GridPlan, counts: DayCounts) -> VectorDocument:
    palette = request.palette
    primitives: list[Primitive] = [Rect(0, 0, grid.width, grid.height, palette.background)]

    # The widget band is a reservation only, nothing is drawn in it
    for index, line in enumerate(grid.goal_lines):
        primitives.append(
            TextRun(
                x=grid.content_center,
                y=grid.goal_block_y + index * grid.goal_line_height,
                spans=(TextSpan(line, request.resolved_goal_color),),
                font_size=grid.goal_font_size,
                font_family=GOAL_FONT_FAMILY,
                font_weight="bold",
                shadow=True,
            )
        )

    style = resolve_style(request.marker_style)
    current_marker: int | None = None
    for cell in layout_cells(grid, counts):
        if cell.state is DayState.CURRENT:
            current_marker = len(primitives)
        primitives.append(
            render_marker(
                style,
                cell.state,
                palette,
                cell.x,
                cell.y,
                grid.marker_base_size,
                grid.marker_render_size,
            )
        )

    if request.show_text:
        days_text, percentage_text = progress_label(request, counts)
        primitives.append(
            TextRun(
                x=grid.content_center,
                y=grid.progress_text_y,
                spans=(
                    TextSpan(days_text, palette.current),
                    TextSpan(percentage_text, PERCENTAGE_COLOR),
                ),
                font_size=grid.font_size,
                font_family=PROGRESS_FONT_FAMILY,
                font_weight="600",
            )
        )

    logger.debug(
        "Composed %d primitives for %d days (current marker %s)",
        len(primitives),
        counts.total_days,
        current_marker,
    )
    return VectorDocument(
        width=grid.width,
        height=grid.height,
        background=palette.background,
        primitives=tuple(primitives),
        current_marker=current_marker,
    )


def fmt(value: float) -> str:
    """Shortest round-tripping text for a number, integral values without a fraction."""
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _attr(value: str) -> str:
    return escape(value, {'"': "&quot;"})


def _svg_primitive(primitive: Primitive) -> str:
    if isinstance(primitive, Rect):
        return (
            f'<rect x="{fmt(primitive.x)}" y="{fmt(primitive.y)}" width="{fmt(primitive.width)}"'
            f' height="{fmt(primitive.height)}" fill="{_attr(primitive.fill)}"/>'
        )
    if isinstance(primitive, Circle):
        stroke = ""
        if primitive.stroke is not None:
            stroke = (
                f' stroke="{_attr(primitive.stroke)}"'
                f' stroke-width="{fmt(primitive.stroke_width or 0)}"'
            )
        return (
            f'<circle cx="{fmt(primitive.cx)}" cy="{fmt(primitive.cy)}" r="{fmt(primitive.r)}"'
            f' fill="{_attr(primitive.fill)}"{stroke}/>'
        )
    if isinstance(primitive, IconPath):
        view_w, view_h = primitive.view_box
        return (
            f'<svg x="{fmt(primitive.x)}" y="{fmt(primitive.y)}" width="{fmt(primitive.size)}"'
            f' height="{fmt(primitive.size)}" viewBox="0 0 {fmt(view_w)} {fmt(view_h)}">'
            f'<path d="{_attr(primitive.path)}" fill="{_attr(primitive.fill)}"/></svg>'
        )

    shadow = ' style="text-shadow: 2px 2px 4px rgba(0,0,0,0.3);"' if primitive.shadow else ""
    spans = "".join(
        f'<tspan fill="{_attr(span.fill)}">{escape(span.text)}</tspan>' for span in primitive.spans
    )
    return (
        f'<text x="{fmt(primitive.x)}" y="{fmt(primitive.y)}" text-anchor="middle"'
        f' font-family="{_attr(primitive.font_family)}" font-size="{fmt(primitive.font_size)}"'
        f' font-weight="{primitive.font_weight}" xml:space="preserve"{shadow}>{spans}</text>'
    )


def to_svg(document: VectorDocument) -> str:
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{document.width}"'
        f' height="{document.height}">'
    ]
    lines.extend(f"  {_svg_primitive(primitive)}" for primitive in document.primitives)
    lines.append("</svg>")
    return "\n".join(lines) + "\n"
