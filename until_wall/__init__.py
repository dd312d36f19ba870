from until_wall.animation import FPS, pulse_scale, sequence
from until_wall.dates import DayCounts, DayState, classify
from until_wall.document import compose, to_svg
from until_wall.geometry import DayCell, GridPlan, layout_cells, plan
from until_wall.life_calendar import LifeCalendar, render
from until_wall.markers import MarkerStyleCode, render_marker
from until_wall.request import (
    OutputFormat,
    Palette,
    ProgressMode,
    RenderRequest,
    SafeArea,
    cache_key,
)
from until_wall.shapes import VectorDocument

__all__ = [
    "FPS",
    "DayCell",
    "DayCounts",
    "DayState",
    "GridPlan",
    "LifeCalendar",
    "MarkerStyleCode",
    "OutputFormat",
    "Palette",
    "ProgressMode",
    "RenderRequest",
    "SafeArea",
    "VectorDocument",
    "cache_key",
    "classify",
    "compose",
    "layout_cells",
    "plan",
    "pulse_scale",
    "render",
    "render_marker",
    "sequence",
    "to_svg",
]
