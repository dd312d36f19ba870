"""Tests for the current-day pulse animation."""

import datetime

import pytest

from until_wall.animation import FPS, MAX_SCALE, MIN_SCALE, PULSE_FRAMES, pulse_scale, sequence
from until_wall.life_calendar import LifeCalendar
from until_wall.markers import MarkerStyleCode
from until_wall.shapes import Circle, IconPath


class TestPulseScale:
    def test_cycle_closes(self):
        assert pulse_scale(0) == pytest.approx(MIN_SCALE)
        assert pulse_scale(PULSE_FRAMES) == pytest.approx(pulse_scale(0))

    def test_range_over_frames(self):
        scales = [pulse_scale(frame) for frame in range(PULSE_FRAMES)]

        assert min(scales) == pytest.approx(1.0)
        assert max(scales) == pytest.approx(1.5, abs=0.01)
        assert all(MIN_SCALE <= scale <= MAX_SCALE for scale in scales)

    def test_rises_then_falls(self):
        scales = [pulse_scale(frame) for frame in range(PULSE_FRAMES + 1)]
        peak = scales.index(max(scales))

        assert scales[: peak + 1] == sorted(scales[: peak + 1])
        assert scales[peak:] == sorted(scales[peak:], reverse=True)

    def test_frame_rate(self):
        assert FPS == 30


class TestSequence:
    def test_only_current_marker_changes(self, make_request, today):
        document = LifeCalendar(make_request(), today=today).gen_document()
        frames = sequence(document)
        index = document.current_marker

        assert len(frames) == PULSE_FRAMES
        for frame_number, frame in enumerate(frames):
            for i, (before, after) in enumerate(zip(document.primitives, frame.primitives)):
                if i == index:
                    assert after.r == pytest.approx(before.r * pulse_scale(frame_number))
                    assert (after.cx, after.cy) == (before.cx, before.cy)
                else:
                    assert after == before

    def test_first_frame_matches_static_document(self, make_request, today):
        document = LifeCalendar(make_request(), today=today).gen_document()
        assert sequence(document)[0] == document

    def test_icon_marker_pulses_about_its_centre(self, make_request, today):
        request = make_request(marker_style=MarkerStyleCode.PAW)
        document = LifeCalendar(request, today=today).gen_document()
        before = document.primitives[document.current_marker]
        after = sequence(document)[7].primitives[document.current_marker]

        assert isinstance(after, IconPath)
        assert after.size == pytest.approx(before.size * pulse_scale(7))
        assert after.x + after.size / 2 == pytest.approx(before.x + before.size / 2)
        assert after.y + after.size / 2 == pytest.approx(before.y + before.size / 2)

    def test_without_current_day_frames_are_static(self, make_request):
        document = LifeCalendar(make_request(), today=datetime.date(2031, 1, 1)).gen_document()
        frames = sequence(document)

        assert len(frames) == PULSE_FRAMES
        assert all(frame == document for frame in frames)

    def test_custom_frame_count(self, make_request, today):
        calendar = LifeCalendar(make_request(), today=today, frame_count=4)
        frames = calendar.gen_frames()
        index = frames[0].current_marker

        assert len(frames) == 4
        radii = [frame.primitives[index].r for frame in frames]
        assert radii[0] < radii[2]

    def test_other_markers_in_current_color_stay_put(self, make_request, today):
        # A past color equal to the current color must not pulse
        palette = make_request().palette
        request = make_request(palette=type(palette)(past=palette.current))
        document = LifeCalendar(request, today=today).gen_document()
        frame = sequence(document)[7]

        changed = [
            i
            for i, (a, b) in enumerate(zip(document.primitives, frame.primitives))
            if a != b
        ]
        assert changed == [document.current_marker]
        assert isinstance(frame.primitives[changed[0]], Circle)
