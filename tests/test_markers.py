"""Tests for the marker style catalog."""

import pytest

from until_wall import glyphs
from until_wall.dates import DayState
from until_wall.markers import CATALOG, MarkerStyleCode, render_marker, resolve_style
from until_wall.request import Palette
from until_wall.shapes import Circle, IconPath

PALETTE = Palette(background="#000000", past="#111111", current="#222222", future="#333333")


class TestSolid:
    @pytest.mark.parametrize(
        ("state", "color"),
        [(DayState.PAST, "#111111"), (DayState.CURRENT, "#222222"), (DayState.FUTURE, "#333333")],
    )
    def test_filled_circle_in_state_color(self, state, color):
        marker = render_marker(MarkerStyleCode.SOLID, state, PALETTE, 10, 20, 40, 40)

        assert marker == Circle(cx=30, cy=40, r=20, fill=color)

    def test_scale_grows_from_cell_origin(self):
        marker = render_marker(1, DayState.PAST, PALETTE, 10, 20, 40, 60)
        assert (marker.cx, marker.cy, marker.r) == (40, 50, 30)


class TestRing:
    def test_past_day_is_stroked_ring(self):
        marker = render_marker(MarkerStyleCode.RING, DayState.PAST, PALETTE, 0, 0, 40, 40)

        assert marker.stroke == "#111111"
        assert marker.fill == "#000000"
        assert marker.stroke_width == pytest.approx(0.15 * 40)
        assert marker.r == pytest.approx(20 - 0.15 * 40 / 2)

    @pytest.mark.parametrize("state", [DayState.CURRENT, DayState.FUTURE])
    def test_other_days_are_plain_circles(self, state):
        marker = render_marker(MarkerStyleCode.RING, state, PALETTE, 0, 0, 40, 40)

        assert marker.stroke is None
        assert marker.stroke_width is None
        assert marker.r == 20


class TestIcons:
    def test_hearts_use_three_distinct_glyphs(self):
        paths = {
            state: render_marker(MarkerStyleCode.HEARTS, state, PALETTE, 0, 0, 40, 40).path
            for state in DayState
        }

        assert paths[DayState.PAST] == glyphs.HEART
        assert paths[DayState.CURRENT] == glyphs.HEALING_HEART
        assert paths[DayState.FUTURE] == glyphs.BROKEN_HEART
        assert len(set(paths.values())) == 3

    @pytest.mark.parametrize(
        "code",
        [
            MarkerStyleCode.POOP,
            MarkerStyleCode.PIGGY_BANK,
            MarkerStyleCode.MONEY_BAG,
            MarkerStyleCode.CAT,
            MarkerStyleCode.PAW,
            MarkerStyleCode.GHOST,
        ],
    )
    def test_single_glyph_styles_only_recolor(self, code):
        markers = [render_marker(code, state, PALETTE, 5, 6, 40, 40) for state in DayState]

        assert len({marker.path for marker in markers}) == 1
        assert [marker.fill for marker in markers] == ["#111111", "#222222", "#333333"]
        assert all((m.x, m.y, m.size) == (5, 6, 40) for m in markers)

    @pytest.mark.parametrize(
        ("code", "factor"),
        [
            (MarkerStyleCode.DACHSHUND, 1.3),
            (MarkerStyleCode.GOLD_INGOT, 2.1),
            (MarkerStyleCode.G_WAGEN, 1.5),
        ],
    )
    def test_oversized_glyphs_are_centred_on_cell(self, code, factor):
        marker = render_marker(code, DayState.FUTURE, PALETTE, 100, 200, 40, 40)

        assert isinstance(marker, IconPath)
        assert marker.size == pytest.approx(40 * factor)
        assert marker.x + marker.size / 2 == pytest.approx(100 + 20)
        assert marker.y + marker.size / 2 == pytest.approx(200 + 20)

    def test_view_boxes(self):
        assert CATALOG[MarkerStyleCode.HEARTS].view_box == (24, 24)
        assert CATALOG[MarkerStyleCode.PAW].view_box == (452.589, 452.59)


class TestFallback:
    def test_catalog_covers_every_code(self):
        assert set(CATALOG) == set(MarkerStyleCode)
        assert len(CATALOG) == 12

    @pytest.mark.parametrize("code", [-1, 12, 101])
    def test_unknown_code_is_solid(self, code):
        assert resolve_style(code) is CATALOG[MarkerStyleCode.SOLID]
        marker = render_marker(code, DayState.CURRENT, PALETTE, 0, 0, 10, 10)
        assert marker == Circle(cx=5, cy=5, r=5, fill="#222222")

    def test_negative_sizes_are_clamped(self):
        circle = render_marker(MarkerStyleCode.SOLID, DayState.PAST, PALETTE, 0, 0, -4, -4)
        ring = render_marker(MarkerStyleCode.RING, DayState.PAST, PALETTE, 0, 0, -4, -4)
        icon = render_marker(MarkerStyleCode.CAT, DayState.PAST, PALETTE, 0, 0, -4, -4)

        assert circle.r == 0
        assert ring.r == 0
        assert ring.stroke_width == 0
        assert icon.size == 0
