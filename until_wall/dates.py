import datetime
import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DATE_FORMATS: tuple[str, ...] = ("%Y-%m-%d", "%Y/%m/%d", "%d/%m/%Y", "%d-%m-%Y")


class DayState(enum.Enum):
    PAST = "past"
    CURRENT = "current"
    FUTURE = "future"


@dataclass(frozen=True)
class DayCounts:
    total_days: int
    current_day_index: int
    days_passed: int
    days_remaining: int
    elapsed_days: int
    percentage: str


def parse_date(datestr: str) -> datetime.date:
    for form in DATE_FORMATS:
        try:
            parsed: datetime.datetime = datetime.datetime.strptime(datestr.strip(), form)  # noqa: DTZ007
        except ValueError:
            continue
        else:
            return parsed.date()

    raise ValueError(f"Incorrect date format {datestr!r}: must be YMD or DMY with / or -")


def to_date(value: datetime.date | datetime.datetime) -> datetime.date:
    # datetime is a subclass of date, strip the time of day
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def classify(
    start: datetime.date | datetime.datetime,
    end: datetime.date | datetime.datetime,
    today: datetime.date | datetime.datetime,
) -> DayCounts:
    start, end, today = to_date(start), to_date(end), to_date(today)

    total_days: int = (end - start).days + 1
    elapsed: int = (today - start).days
    days_passed: int = max(0, elapsed)

    current_day_index = -1
    if 0 < days_passed < total_days:
        current_day_index = days_passed - 1

    if total_days > 0:
        percentage = f"{days_passed / total_days * 100:.1f}"
    else:
        logger.debug("Degenerate date range %s..%s, reporting 0%%", start, end)
        percentage = "0.0"

    return DayCounts(
        total_days=total_days,
        current_day_index=current_day_index,
        days_passed=days_passed,
        days_remaining=total_days - days_passed,
        elapsed_days=max(0, elapsed),
        percentage=percentage,
    )


def day_state(index: int, current_day_index: int) -> DayState:
    if index < current_day_index:
        return DayState.PAST
    if index == current_day_index:
        return DayState.CURRENT
    return DayState.FUTURE
