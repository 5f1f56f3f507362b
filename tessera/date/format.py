"""
tessera.date.format

Token-substitution date formatter.

Tokens:

**Hours**
 - ``H``   24-hour hour (see the note on ``H`` below)
 - ``HH``  24-hour hour with leading zero (00-23)
 - ``h``   12-hour hour (1-12)
 - ``hh``  12-hour hour with leading zero (01-12)

**Minutes / seconds**
 - ``m`` / ``mm``  minutes (0-59 / 00-59)
 - ``s`` / ``ss``  seconds (0-59 / 00-59)

**Sub-second**
 - ``SSS`` milliseconds (0-999, unpadded)
 - ``SS``  hundredths digit, ``floor(ms / 10) % 10``
 - ``S``   tenths of a second (see the note on ``S`` below)

**AM/PM**
 - ``a`` lowercase ``am``/``pm``, ``A`` uppercase ``AM``/``PM``

**Year**
 - ``YYYY`` four-digit year, ``YY`` last two digits

**Month**
 - ``M`` / ``MM`` month number (1-12 / 01-12)
 - ``MMM`` / ``MMMM`` abbreviated / full month name

**Day**
 - ``D`` / ``DD`` day of month (1-31 / 01-31)
 - ``ddd`` / ``dddd`` abbreviated / full weekday name
 - ``DDD`` day of year (1-366)

**Other**
 - ``W`` ISO week of year (1-53)

``Z``, ``ZZ`` and ``z`` are not implemented and pass through as literal text.

Tokens are applied one at a time in the order of ``FORMAT_TOKENS``. Each pass
only looks at template text that no earlier pass produced, so values such as
``PM`` or ``March`` are never re-read as tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from .getters import (
    Instant,
    as_datetime,
    day_of_week_abbr,
    day_of_week_name,
    day_of_year,
    iso_week_of_year,
    month_abbr,
    month_name,
    quarter_of_year,
    weekday_index,
)


def _pad(value: int) -> str:
    return f"{value:02d}"


def _pad_three(value: int) -> str:
    return f"{value:03d}"


def _hour_12(moment: datetime) -> int:
    return moment.hour % 12 or 12


def _am_pm(moment: datetime) -> str:
    return "am" if moment.hour < 12 else "pm"


def _milliseconds(moment: datetime) -> int:
    return moment.microsecond // 1000


@dataclass(frozen=True)
class FormatToken:
    """
    One row of the substitution table.

    ``replace_all`` selects between replacing every occurrence and only the
    first one. ``overwrites_previous`` rows do not search the template; they
    rewrite whatever slot the row right before them produced.
    """

    pattern: str
    render: Callable[[datetime], str]
    replace_all: bool = False
    overwrites_previous: bool = False


FORMAT_TOKENS: Tuple[FormatToken, ...] = (
    FormatToken("a", _am_pm, replace_all=True),
    FormatToken("A", lambda d: _am_pm(d).upper(), replace_all=True),
    FormatToken("ss", lambda d: _pad(d.second), replace_all=True),
    FormatToken("s", lambda d: str(d.second), replace_all=True),
    FormatToken("mm", lambda d: _pad(d.minute), replace_all=True),
    FormatToken("m", lambda d: str(d.minute), replace_all=True),
    FormatToken("hh", lambda d: _pad(_hour_12(d)), replace_all=True),
    FormatToken("h", lambda d: str(_hour_12(d)), replace_all=True),
    FormatToken("dddd", lambda d: day_of_week_name(weekday_index(d))),
    FormatToken("ddd", lambda d: day_of_week_abbr(weekday_index(d))),
    FormatToken("YYYY", lambda d: f"{d.year:04d}"),
    FormatToken("YY", lambda d: f"{d.year % 100:02d}"),
    FormatToken("W", lambda d: str(iso_week_of_year(d))),
    FormatToken("SSS", lambda d: str(_milliseconds(d))),
    FormatToken("SS", lambda d: str(_milliseconds(d) // 10 % 10)),
    FormatToken("S", lambda d: str(_milliseconds(d) // 100)),
    # Known oddity: the quarter reuses the single-S slot, so tenths of a
    # second never reach the output. Kept until the token is redefined.
    FormatToken("S", lambda d: str(quarter_of_year(d)), overwrites_previous=True),
    FormatToken("MMMM", lambda d: month_name(d.month - 1)),
    FormatToken("MMM", lambda d: month_abbr(d.month - 1)),
    FormatToken("MM", lambda d: _pad(d.month)),
    FormatToken("M", lambda d: str(d.month)),
    FormatToken("HH", lambda d: _pad(d.hour)),
    FormatToken("H", lambda d: str(d.hour)),
    # Known oddity: same slot reuse as S above; H renders the padded day of year.
    FormatToken("H", lambda d: _pad_three(day_of_year(d)), overwrites_previous=True),
    FormatToken("DDD", lambda d: str(day_of_year(d))),
    FormatToken("DD", lambda d: _pad(d.day)),
    FormatToken("D", lambda d: str(d.day)),
)


class _Template:
    """Template split into literal text and already-substituted slots."""

    def __init__(self, text: str):
        self._segments: List[Tuple[str, bool]] = [(text, True)]

    def substitute(self, pattern: str, value: str, replace_all: bool) -> List[int]:
        """Replace ``pattern`` in literal text; return indices of the new slots."""
        segments: List[Tuple[str, bool]] = []
        slots: List[int] = []
        done = False

        for text, literal in self._segments:
            if done or not literal or pattern not in text:
                segments.append((text, literal))
                continue

            pieces = text.split(pattern) if replace_all else text.split(pattern, 1)
            for position, piece in enumerate(pieces):
                if position:
                    slots.append(len(segments))
                    segments.append((value, False))
                if piece:
                    segments.append((piece, True))
            done = not replace_all

        self._segments = segments
        return slots

    def overwrite(self, slots: List[int], value: str) -> None:
        for index in slots:
            self._segments[index] = (value, False)

    def render(self) -> str:
        return "".join(text for text, _ in self._segments)


def format_date(instant: Optional[Instant], template: str) -> str:
    """
    Render ``template`` for ``instant`` (the current local time when None).

    Unrecognized characters are returned unchanged and in place.

    Example:
        >>> format_date(datetime(2024, 3, 5, 14, 5, 9), "YYYY-MM-DD hh:mm:ss A")
        '2024-03-05 02:05:09 PM'
    """
    moment = as_datetime(instant)
    working = _Template(template)
    slots: List[int] = []

    for token in FORMAT_TOKENS:
        if token.overwrites_previous:
            if slots:
                working.overwrite(slots, token.render(moment))
            continue
        slots = working.substitute(token.pattern, token.render(moment), token.replace_all)

    return working.render()
