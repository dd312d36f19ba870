"""Shared fixtures: request factories and a fixed "today"."""

import dataclasses
import datetime

import pytest

from until_wall.request import RenderRequest

JAN_1 = datetime.date(2024, 1, 1)


@pytest.fixture
def make_request():
    """Builds a RenderRequest from keyword overrides of the defaults."""

    def _make(**overrides) -> RenderRequest:
        overrides.setdefault("start_date", JAN_1)
        overrides.setdefault("end_date", datetime.date(2024, 1, 15))
        return dataclasses.replace(RenderRequest(), **overrides)

    return _make


@pytest.fixture
def today() -> datetime.date:
    return datetime.date(2024, 1, 8)
