"""Tests for date parsing and day classification."""

import datetime

import pytest

from until_wall.dates import DayState, classify, day_state, parse_date

D = datetime.date


class TestParseDate:
    @pytest.mark.parametrize(
        "text",
        ["2024-01-31", "2024/01/31", "31/01/2024", "31-01-2024", "  2024-01-31 "],
    )
    def test_accepts_ymd_and_dmy(self, text):
        assert parse_date(text) == D(2024, 1, 31)

    def test_rejects_garbage(self):
        with pytest.raises(ValueError, match="Incorrect date format"):
            parse_date("January 31st")


class TestClassify:
    def test_fifteen_day_range(self):
        counts = classify(D(2024, 1, 1), D(2024, 1, 15), D(2024, 1, 8))

        assert counts.total_days == 15
        assert counts.days_passed == 7
        assert counts.current_day_index == 6
        assert counts.days_remaining == 8
        assert counts.percentage == "46.7"

    def test_time_of_day_is_ignored(self):
        morning = classify(D(2024, 1, 1), D(2024, 1, 15), datetime.datetime(2024, 1, 8, 0, 1))
        night = classify(D(2024, 1, 1), D(2024, 1, 15), datetime.datetime(2024, 1, 8, 23, 59))
        assert morning == night

    def test_before_start_has_no_current_day(self):
        counts = classify(D(2024, 1, 1), D(2024, 1, 15), D(2023, 12, 1))

        assert counts.current_day_index == -1
        assert counts.days_passed == 0
        assert counts.elapsed_days == 0
        assert counts.days_remaining == 15
        assert counts.percentage == "0.0"

    def test_start_day_itself_has_no_current_day(self):
        counts = classify(D(2024, 1, 1), D(2024, 1, 15), D(2024, 1, 1))
        assert counts.current_day_index == -1

    def test_after_end_has_no_current_day(self):
        counts = classify(D(2024, 1, 1), D(2024, 1, 15), D(2024, 3, 1))

        assert counts.current_day_index == -1
        assert counts.days_remaining < 0

    def test_elapsed_keeps_counting_past_the_end(self):
        counts = classify(D(2024, 1, 1), D(2024, 1, 15), D(2024, 2, 1))
        assert counts.elapsed_days == 31

    def test_reversed_range_reports_zero_percent(self):
        counts = classify(D(2024, 1, 10), D(2024, 1, 1), D(2024, 1, 5))

        assert counts.total_days == -8
        assert counts.current_day_index == -1
        assert counts.percentage == "0.0"

    def test_single_day_range_is_never_current(self):
        counts = classify(D(2024, 1, 1), D(2024, 1, 1), D(2024, 1, 1))

        assert counts.total_days == 1
        assert counts.current_day_index == -1


class TestDayState:
    def test_states_relative_to_current(self):
        assert day_state(2, 5) is DayState.PAST
        assert day_state(5, 5) is DayState.CURRENT
        assert day_state(6, 5) is DayState.FUTURE

    def test_everything_is_future_without_current_day(self):
        assert {day_state(i, -1) for i in range(10)} == {DayState.FUTURE}
