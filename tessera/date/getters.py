"""
tessera.date.getters

Calendar tables and pure getters for derived calendar scalars.

Indices follow the zero-based convention: day 0 is Sunday, month 0 is January.
Getters that take an instant accept a ``date`` or ``datetime`` and read the
local wall clock when given ``None``.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence, Union

Instant = Union[date, datetime]

# fmt: off
DAYS_OF_WEEK = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
DAYS_OF_WEEK_ABBR = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTHS_OF_YEAR = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTHS_OF_YEAR_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
# fmt: on


class OutOfRangeError(IndexError):
    """Raised when a calendar table index falls outside its table."""


def _lookup(table: Sequence[str], index: int, kind: str) -> str:
    # bool is an int subclass but never a meaningful index
    if not isinstance(index, int) or isinstance(index, bool):
        raise OutOfRangeError(f"{kind} index must be an integer, got {index!r}")
    if not 0 <= index < len(table):
        raise OutOfRangeError(f"{kind} index {index} outside [0, {len(table) - 1}]")
    return table[index]


def day_of_week_name(index: int) -> str:
    return _lookup(DAYS_OF_WEEK, index, "Day")


def day_of_week_abbr(index: int) -> str:
    return _lookup(DAYS_OF_WEEK_ABBR, index, "Day")


def month_name(index: int) -> str:
    return _lookup(MONTHS_OF_YEAR, index, "Month")


def month_abbr(index: int) -> str:
    return _lookup(MONTHS_OF_YEAR_ABBR, index, "Month")


def as_datetime(instant: Optional[Instant]) -> datetime:
    """Widen an instant to a ``datetime``; a plain ``date`` means midnight."""
    if instant is None:
        return datetime.now()
    if isinstance(instant, datetime):
        return instant
    if isinstance(instant, date):
        return datetime.combine(instant, time())
    raise TypeError(f"Expected a date or datetime, got {type(instant).__name__}")


def _calendar_date(instant: Optional[Instant]) -> date:
    if instant is None:
        return datetime.now().date()
    if isinstance(instant, datetime):
        return instant.date()
    return instant


def weekday_index(instant: Optional[Instant] = None) -> int:
    """Zero-based day of week with Sunday as 0."""
    return _calendar_date(instant).isoweekday() % 7


def iso_week_of_year(instant: Optional[Instant] = None) -> int:
    """
    ISO-8601 week number (1-53).

    The date is moved to the Thursday of its Monday-based week; that Thursday's
    year owns the week. Week 1 is the week holding January 4th, so the count is
    taken against the Thursday of January 4th's own week.
    """
    day = _calendar_date(instant)
    monday_offset = (weekday_index(day) + 6) % 7
    thursday = day - timedelta(days=monday_offset) + timedelta(days=3)

    january_fourth = date(thursday.year, 1, 4)
    first_thursday = january_fourth - timedelta(days=january_fourth.weekday()) + timedelta(days=3)

    return 1 + (thursday - first_thursday).days // 7


def quarter_of_year(instant: Optional[Instant] = None) -> int:
    month_index = _calendar_date(instant).month - 1
    return month_index // 3 + 1


def day_of_year(instant: Optional[Instant] = None) -> int:
    """1-based ordinal day, counted on calendar dates so DST shifts cannot skew it."""
    day = _calendar_date(instant)
    return (day - date(day.year, 1, 1)).days + 1
