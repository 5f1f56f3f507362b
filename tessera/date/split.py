"""Break an instant into raw and zero-padded date/time segments."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .getters import Instant, as_datetime


def _pad(value: int, length: int = 2) -> str:
    return str(value).zfill(length)


@dataclass(frozen=True)
class SplitDate:
    now: datetime
    full_year: int
    month_index: int
    date: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    def am_pm(self) -> str:
        """``AM`` or ``PM`` based on ``hours``."""
        return "AM" if self.hours < 12 else "PM"

    def padded_date_segments(self) -> Dict[str, Any]:
        return {
            "year": self.full_year,
            "month": _pad(self.month_index + 1),
            "date": _pad(self.date),
        }

    def padded_time_segments(self) -> Dict[str, str]:
        return {
            "hours": _pad(self.hours),
            "minutes": _pad(self.minutes),
            "seconds": _pad(self.seconds),
            "milliseconds": _pad(self.milliseconds, 3),
        }

    def civilian_time(self) -> Dict[str, Any]:
        """
        Time segments on a 12-hour clock.

        Hours, minutes and seconds come back as two-digit strings; milliseconds
        stay an int. Noon and midnight read as ``12``.
        """
        a = "am" if self.hours < 12 else "pm"
        return {
            "hours": _pad(self.hours % 12 or 12),
            "minutes": _pad(self.minutes),
            "seconds": _pad(self.seconds),
            "milliseconds": self.milliseconds,
            "a": a,
            "A": a.upper(),
        }


def split_date(instant: Optional[Instant] = None) -> SplitDate:
    d = as_datetime(instant)
    return SplitDate(
        now=d,
        full_year=d.year,
        month_index=d.month - 1,
        date=d.day,
        hours=d.hour,
        minutes=d.minute,
        seconds=d.second,
        milliseconds=d.microsecond // 1000,
    )
