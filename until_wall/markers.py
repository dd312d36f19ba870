import enum
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from until_wall import glyphs
from until_wall.dates import DayState
from until_wall.request import Palette
from until_wall.shapes import Circle, IconPath, Marker

logger = logging.getLogger(__name__)

RING_STROKE_RATIO: float = 0.15


class MarkerStyleCode(enum.IntEnum):
    RING = 0
    SOLID = 1
    HEARTS = 2
    POOP = 3
    PIGGY_BANK = 4
    MONEY_BAG = 5
    DACHSHUND = 6
    CAT = 7
    PAW = 8
    GHOST = 9
    GOLD_INGOT = 10
    G_WAGEN = 11


DEFAULT_STYLE: MarkerStyleCode = MarkerStyleCode.SOLID


def state_color(state: DayState, palette: Palette) -> str:
    if state is DayState.PAST:
        return palette.past
    if state is DayState.CURRENT:
        return palette.current
    return palette.future


class MarkerStyle(Protocol):
    def render(
        self,
        state: DayState,
        palette: Palette,
        x: float,
        y: float,
        base_size: float,
        render_size: float,
    ) -> Marker: ...


def _filled_circle(color: str, x: float, y: float, render_size: float) -> Circle:
    radius = max(0.0, render_size / 2)
    return Circle(cx=x + render_size / 2, cy=y + render_size / 2, r=radius, fill=color)


@dataclass(frozen=True)
class SolidStyle:
    def render(
        self,
        state: DayState,
        palette: Palette,
        x: float,
        y: float,
        base_size: float,
        render_size: float,
    ) -> Marker:
        return _filled_circle(state_color(state, palette), x, y, render_size)


@dataclass(frozen=True)
class RingStyle:
    """Past days are hollow rings, current and future days stay filled."""

    def render(
        self,
        state: DayState,
        palette: Palette,
        x: float,
        y: float,
        base_size: float,
        render_size: float,
    ) -> Marker:
        if state is not DayState.PAST:
            return _filled_circle(state_color(state, palette), x, y, render_size)

        radius = render_size / 2
        stroke_width = max(0.0, render_size * RING_STROKE_RATIO)
        return Circle(
            cx=x + radius,
            cy=y + radius,
            r=max(0.0, radius - stroke_width / 2),
            fill=palette.background,
            stroke=palette.past,
            stroke_width=stroke_width,
        )


@dataclass(frozen=True)
class IconStyle:
    paths: Mapping[DayState, str]
    view_box: tuple[float, float]
    # Glyphs larger than their cell are centred on it and overflow evenly
    display_scale: float = 1.0

    @classmethod
    def single(
        cls, path: str, view_box: tuple[float, float], display_scale: float = 1.0
    ) -> "IconStyle":
        return cls(
            paths=dict.fromkeys(DayState, path), view_box=view_box, display_scale=display_scale
        )

    def render(
        self,
        state: DayState,
        palette: Palette,
        x: float,
        y: float,
        base_size: float,
        render_size: float,
    ) -> Marker:
        size = max(0.0, render_size * self.display_scale)
        if self.display_scale != 1.0:
            offset = (base_size - size) / 2
            x, y = x + offset, y + offset
        return IconPath(
            x=x,
            y=y,
            size=size,
            path=self.paths[state],
            view_box=self.view_box,
            fill=state_color(state, palette),
        )


CATALOG: dict[MarkerStyleCode, MarkerStyle] = {
    MarkerStyleCode.RING: RingStyle(),
    MarkerStyleCode.SOLID: SolidStyle(),
    MarkerStyleCode.HEARTS: IconStyle(
        paths={
            DayState.PAST: glyphs.HEART,
            DayState.CURRENT: glyphs.HEALING_HEART,
            DayState.FUTURE: glyphs.BROKEN_HEART,
        },
        view_box=(24, 24),
    ),
    MarkerStyleCode.POOP: IconStyle.single(glyphs.POOP, (512, 512)),
    MarkerStyleCode.PIGGY_BANK: IconStyle.single(glyphs.PIGGY_BANK, (32, 32)),
    MarkerStyleCode.MONEY_BAG: IconStyle.single(glyphs.MONEY_BAG, (511.722, 511.722)),
    MarkerStyleCode.DACHSHUND: IconStyle.single(glyphs.DACHSHUND, (482.877, 482.877), 1.3),
    MarkerStyleCode.CAT: IconStyle.single(glyphs.CAT, (121.6, 121.6)),
    MarkerStyleCode.PAW: IconStyle.single(glyphs.PAW, (452.589, 452.59)),
    MarkerStyleCode.GHOST: IconStyle.single(glyphs.GHOST, (32, 32)),
    MarkerStyleCode.GOLD_INGOT: IconStyle.single(glyphs.GOLD_INGOT, (512, 512), 2.1),
    MarkerStyleCode.G_WAGEN: IconStyle.single(glyphs.G_WAGEN, (200, 200), 1.5),
}


def resolve_style(code: int) -> MarkerStyle:
    try:
        return CATALOG[MarkerStyleCode(code)]
    except ValueError:
        logger.debug("Unknown marker style %r, falling back to %s", code, DEFAULT_STYLE.name)
        return CATALOG[DEFAULT_STYLE]


def render_marker(
    style: int | MarkerStyle,
    state: DayState,
    palette: Palette,
    x: float,
    y: float,
    base_size: float,
    render_size: float,
) -> Marker:
    if isinstance(style, int):
        style = resolve_style(style)
    return style.render(state, palette, x, y, base_size, render_size)
