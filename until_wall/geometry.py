import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

from until_wall.dates import DayCounts, DayState, day_state
from until_wall.request import RenderRequest

logger = logging.getLogger(__name__)

COLUMNS_PER_ROW: int = 15
BASE_PADDING: int = 60
WIDGET_BAND_RATIO: float = 0.15
GRID_TOP_RATIO: float = 0.05
BOTTOM_TEXT_RATIO: float = 0.15
HORIZONTAL_GAP_RATIO: float = 0.03
VERTICAL_GAP_RATIO: float = 0.02
FONT_SIZE_RATIO: float = 0.035
GOAL_FONT_RATIO: float = 1.5
GOAL_LINE_HEIGHT_RATIO: float = 1.3
# Distance of the progress text baseline from the bottom edge, ignores safe areas
PROGRESS_TEXT_BOTTOM_OFFSET: int = 220


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class GridPlan:
    total_days: int
    columns_per_row: int
    row_count: int
    marker_base_size: float
    marker_render_size: float
    horizontal_gap: int
    vertical_gap: int
    grid_origin_x: float
    grid_origin_y: int

    width: int
    height: int
    widget_band_height: int
    effective_side_padding: int
    content_left: int
    content_width: int
    content_center: float
    calendar_top_y: int
    available_height: int
    calendar_height: int

    font_size: int
    goal_font_size: int
    goal_line_height: int
    goal_lines: tuple[str, ...]
    goal_text_height: int
    goal_block_y: int
    progress_text_y: int

    @property
    def grid_width(self) -> float:
        return self.columns_per_row * self.marker_base_size + (
            self.columns_per_row - 1
        ) * self.horizontal_gap


@dataclass(frozen=True)
class DayCell:
    index: int
    state: DayState
    col: int
    row: int
    # Top-left corner of the cell, absolute canvas pixels
    x: float
    y: float


def plan(request: RenderRequest, counts: DayCounts) -> GridPlan:
    width, height = request.width, request.height
    inset = request.safe_area

    widget_band_height = round_half_up(height * WIDGET_BAND_RATIO) if request.has_widgets else 0

    top_px = round_half_up(height * (inset.top / 100))
    bottom_px = round_half_up(height * (inset.bottom / 100))
    left_px = round_half_up(width * (inset.left / 100))
    right_px = round_half_up(width * (inset.right / 100))

    effective_side_padding = max(BASE_PADDING, left_px, right_px)

    content_width = width - left_px - right_px
    calendar_top_y = widget_band_height + top_px
    available_height = height - calendar_top_y - bottom_px

    grid_top_offset_base = round_half_up(available_height * GRID_TOP_RATIO)
    bottom_text_height = round_half_up(available_height * BOTTOM_TEXT_RATIO)
    calendar_height = available_height - grid_top_offset_base - bottom_text_height

    horizontal_gap = round_half_up(content_width * HORIZONTAL_GAP_RATIO)
    vertical_gap = round_half_up(calendar_height * VERTICAL_GAP_RATIO)

    width_fit = (content_width - (COLUMNS_PER_ROW - 1) * horizontal_gap) / COLUMNS_PER_ROW
    if counts.total_days > 0:
        row_count = math.ceil(counts.total_days / COLUMNS_PER_ROW)
        height_fit = calendar_height / row_count
    else:
        logger.debug("No days to draw (total_days=%d)", counts.total_days)
        row_count = 0
        height_fit = math.inf

    marker_base_size = min(width_fit, height_fit)
    if marker_base_size < 0:
        logger.debug("Canvas %dx%d too small, clamping marker size to 0", width, height)
        marker_base_size = 0.0

    font_size = round_half_up(content_width * FONT_SIZE_RATIO)
    goal_font_size = round_half_up(font_size * GOAL_FONT_RATIO)
    goal_line_height = round_half_up(goal_font_size * GOAL_LINE_HEIGHT_RATIO)
    goal_lines = tuple(request.goal_lines)
    goal_text_height = (
        round_half_up(goal_line_height * len(goal_lines) + font_size * 0.5) if goal_lines else 0
    )
    goal_block_y = (
        calendar_top_y
        + grid_top_offset_base
        + round_half_up(height * (request.goal_text_top_offset / 100))
    )

    grid_width = COLUMNS_PER_ROW * marker_base_size + (COLUMNS_PER_ROW - 1) * horizontal_gap

    return GridPlan(
        total_days=counts.total_days,
        columns_per_row=COLUMNS_PER_ROW,
        row_count=row_count,
        marker_base_size=marker_base_size,
        marker_render_size=marker_base_size * request.marker_scale,
        horizontal_gap=horizontal_gap,
        vertical_gap=vertical_gap,
        grid_origin_x=left_px + (content_width - grid_width) / 2,
        grid_origin_y=grid_top_offset_base + goal_text_height,
        width=width,
        height=height,
        widget_band_height=widget_band_height,
        effective_side_padding=effective_side_padding,
        content_left=left_px,
        content_width=content_width,
        content_center=left_px + content_width / 2,
        calendar_top_y=calendar_top_y,
        available_height=available_height,
        calendar_height=calendar_height,
        font_size=font_size,
        goal_font_size=goal_font_size,
        goal_line_height=goal_line_height,
        goal_lines=goal_lines,
        goal_text_height=goal_text_height,
        goal_block_y=goal_block_y,
        progress_text_y=height - PROGRESS_TEXT_BOTTOM_OFFSET,
    )


def layout_cells(grid: GridPlan, counts: DayCounts) -> Iterator[DayCell]:
    """Yields day cells row-major, wrapping every ``columns_per_row`` markers."""
    x: float = 0
    y: float = 0
    col = row = 0
    origin_x = grid.grid_origin_x
    origin_y = grid.calendar_top_y + grid.grid_origin_y

    for i in range(counts.total_days):
        yield DayCell(
            index=i,
            state=day_state(i, counts.current_day_index),
            col=col,
            row=row,
            x=origin_x + x,
            y=origin_y + y,
        )

        x += grid.marker_base_size + grid.horizontal_gap
        col += 1

        # The last row may be short, never open an empty one after it
        if (i + 1) % grid.columns_per_row == 0 and i < counts.total_days - 1:
            x = 0
            y += grid.marker_base_size + grid.vertical_gap
            col = 0
            row += 1
