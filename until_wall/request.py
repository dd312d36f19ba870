import datetime
import enum
import hashlib
import logging
import urllib.parse
from collections.abc import Mapping
from dataclasses import dataclass, field

from until_wall.dates import parse_date

logger = logging.getLogger(__name__)

DEFAULT_START_DATE: datetime.date = datetime.date(2000, 1, 1)
DEFAULT_END_DATE: datetime.date = datetime.date(2080, 1, 1)
DEFAULT_WIDTH: int = 1290
DEFAULT_HEIGHT: int = 2796
DEFAULT_MARKER_STYLE: int = 1
DEFAULT_MARKER_SCALE: float = 1.0

DEFAULT_BACKGROUND: str = "#1a1a1a"
DEFAULT_PAST_COLOR: str = "#ffffff"
DEFAULT_CURRENT_COLOR: str = "#ff6b35"
DEFAULT_FUTURE_COLOR: str = "#2a2a2a"

# Query parameters that never take part in the cache key
CACHE_BUSTING_PARAMS: frozenset[str] = frozenset({"t"})


class ProgressMode(enum.Enum):
    UNTIL = "until"
    ELAPSED = "elapsed"


class OutputFormat(enum.Enum):
    VECTOR_PREVIEW = "svg"
    RASTER_STATIC = "png"
    RASTER_ANIMATED_SEQUENCE = "frames"
    RASTER_VIDEO = "mp4"
    RASTER_BUNDLE = "live"

    @property
    def is_animated(self) -> bool:
        return self in {
            OutputFormat.RASTER_ANIMATED_SEQUENCE,
            OutputFormat.RASTER_VIDEO,
            OutputFormat.RASTER_BUNDLE,
        }


@dataclass(frozen=True)
class Palette:
    background: str = DEFAULT_BACKGROUND
    past: str = DEFAULT_PAST_COLOR
    current: str = DEFAULT_CURRENT_COLOR
    future: str = DEFAULT_FUTURE_COLOR


@dataclass(frozen=True)
class SafeArea:
    """Insets in percent of the canvas axis they apply to."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0


@dataclass(frozen=True)
class RenderRequest:
    start_date: datetime.date = DEFAULT_START_DATE
    end_date: datetime.date = DEFAULT_END_DATE
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    has_widgets: bool = False
    safe_area: SafeArea = field(default_factory=SafeArea)
    marker_style: int = DEFAULT_MARKER_STYLE
    marker_scale: float = DEFAULT_MARKER_SCALE
    show_text: bool = True
    progress_mode: ProgressMode = ProgressMode.UNTIL
    goal_text: str = ""
    goal_color: str | None = None
    goal_text_top_offset: float = 0.0
    palette: Palette = field(default_factory=Palette)
    output_format: OutputFormat = OutputFormat.RASTER_STATIC

    @property
    def resolved_goal_color(self) -> str:
        return self.goal_color or self.palette.current

    @property
    def goal_lines(self) -> list[str]:
        return self.goal_text.splitlines()

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "RenderRequest":
        """Builds a request from flat string parameters, e.g. an URL query."""

        def number(name: str, default: float, cast: type = float) -> float:
            raw = params.get(name)
            if raw is None or raw == "":
                return default
            try:
                return cast(raw)
            except ValueError:
                raise ValueError(f"Invalid value for {name}: {raw!r}") from None

        def date(name: str, default: datetime.date) -> datetime.date:
            raw = params.get(name)
            return parse_date(raw) if raw else default

        def style_code() -> int:
            # Leading integer part like "2.5" -> 2, anything else renders solid
            raw = params.get("ring_style")
            if not raw:
                return DEFAULT_MARKER_STYLE
            try:
                return int(float(raw))
            except (ValueError, OverflowError):
                logger.debug("Unreadable ring_style %r, using %d", raw, DEFAULT_MARKER_STYLE)
                return DEFAULT_MARKER_STYLE

        def output_format() -> OutputFormat:
            raw = params.get("format") or OutputFormat.RASTER_STATIC.value
            try:
                return OutputFormat(raw)
            except ValueError:
                logger.debug("Unknown format %r, rendering png", raw)
                return OutputFormat.RASTER_STATIC

        current_color = params.get("current_color") or DEFAULT_CURRENT_COLOR
        return cls(
            start_date=date("start_date", DEFAULT_START_DATE),
            end_date=date("end_date", DEFAULT_END_DATE),
            width=int(number("width", DEFAULT_WIDTH, int)),
            height=int(number("height", DEFAULT_HEIGHT, int)),
            has_widgets=params.get("has_widgets") == "true",
            safe_area=SafeArea(
                top=number("offset_top", 0.0),
                bottom=number("offset_bottom", 0.0),
                left=number("offset_left", 0.0),
                right=number("offset_right", 0.0),
            ),
            marker_style=style_code(),
            marker_scale=number("dot_scale", DEFAULT_MARKER_SCALE),
            show_text=params.get("show_text") != "0",
            progress_mode=(
                ProgressMode.ELAPSED if params.get("elapsed_mode") == "true" else ProgressMode.UNTIL
            ),
            goal_text=params.get("goal_text") or "",
            goal_color=params.get("goal_color") or None,
            goal_text_top_offset=number("goal_text_top_offset", 0.0),
            palette=Palette(
                background=params.get("bg_color") or DEFAULT_BACKGROUND,
                past=params.get("past_color") or DEFAULT_PAST_COLOR,
                current=current_color,
                future=params.get("future_color") or DEFAULT_FUTURE_COLOR,
            ),
            output_format=output_format(),
        )

    def to_query(self) -> dict[str, str]:
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "has_widgets": "true" if self.has_widgets else "false",
            "width": str(self.width),
            "height": str(self.height),
            "offset_top": repr(float(self.safe_area.top)),
            "offset_bottom": repr(float(self.safe_area.bottom)),
            "offset_left": repr(float(self.safe_area.left)),
            "offset_right": repr(float(self.safe_area.right)),
            "ring_style": str(self.marker_style),
            "dot_scale": repr(float(self.marker_scale)),
            "show_text": "1" if self.show_text else "0",
            "elapsed_mode": "true" if self.progress_mode is ProgressMode.ELAPSED else "false",
            "goal_text": self.goal_text,
            "goal_color": self.resolved_goal_color,
            "goal_text_top_offset": repr(float(self.goal_text_top_offset)),
            "bg_color": self.palette.background,
            "past_color": self.palette.past,
            "current_color": self.palette.current,
            "future_color": self.palette.future,
            "format": self.output_format.value,
        }


def canonical_query(params: Mapping[str, str]) -> str:
    """Sorted, percent-encoded ``key=value&...`` form; separators in values can't collide."""
    return urllib.parse.urlencode(
        sorted((key, value) for key, value in params.items() if key not in CACHE_BUSTING_PARAMS)
    )


def cache_key(request: RenderRequest | Mapping[str, str]) -> str:
    """Stable digest of a request; "today" is not part of it."""
    params = request.to_query() if isinstance(request, RenderRequest) else request
    return hashlib.md5(canonical_query(params).encode("utf-8")).hexdigest()  # noqa: S324
