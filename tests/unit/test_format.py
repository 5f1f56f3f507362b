from __future__ import annotations

from datetime import date, datetime

import pytest

from tessera.date import FORMAT_TOKENS, format_date

INSTANT = datetime(2024, 3, 5, 14, 5, 9, 456000)  # Tuesday, day 65, ISO week 10


@pytest.mark.parametrize(
    "template, expected",
    [
        ("YYYY-MM-DD", "2024-03-05"),
        ("hh:mm:ss A", "02:05:09 PM"),
        ("h:m:s a", "2:5:9 pm"),
        ("HH:mm", "14:05"),
        ("dddd, MMMM D, YYYY", "Tuesday, March 5, 2024"),
        ("ddd MMM YY", "Tue Mar 24"),
        ("M/D", "3/5"),
        ("[W]", "[10]"),
        ("DDD", "65"),
        ("SSS", "456"),
        ("SS", "5"),
    ],
)
def test_format_date_tokens(template: str, expected: str) -> None:
    assert format_date(INSTANT, template) == expected


def test_substituted_text_is_not_rescanned() -> None:
    assert format_date(INSTANT, "A MMMM dddd") == "PM March Tuesday"
    assert format_date(datetime(2024, 3, 4), "dddd M") == "Monday 3"


def test_unrecognized_text_passes_through() -> None:
    assert format_date(INSTANT, "Z ZZ z Q") == "Z ZZ z Q"
    assert format_date(INSTANT, "[x] | {y} / # ! ?") == "[x] | {y} / # ! ?"
    assert format_date(INSTANT, "") == ""


def test_first_occurrence_only_tokens() -> None:
    assert format_date(INSTANT, "D D") == "5 D"
    assert format_date(INSTANT, "YYYY YYYY") == "2024 24YY"


def test_replace_all_tokens() -> None:
    assert format_date(INSTANT, "s s") == "9 9"
    assert format_date(INSTANT, "hh|hh a|a") == "02|02 pm|pm"


def test_single_s_renders_quarter_of_year() -> None:
    assert format_date(INSTANT, "S") == "1"
    assert format_date(datetime(2024, 11, 2, 0, 0, 0, 999000), "S") == "4"


def test_single_h_renders_padded_day_of_year() -> None:
    assert format_date(INSTANT, "H") == "065"
    assert format_date(datetime(2024, 1, 9, 22), "H") == "009"
    assert format_date(datetime(2024, 12, 31, 5), "H") == "366"


def test_twelve_hour_clock_edges() -> None:
    assert format_date(datetime(2024, 1, 1, 0, 7), "h:mm a") == "12:07 am"
    assert format_date(datetime(2024, 1, 1, 12, 0), "hh A") == "12 PM"
    assert format_date(datetime(2024, 1, 1, 23, 0), "h A") == "11 PM"


def test_small_millisecond_values() -> None:
    moment = datetime(2024, 3, 5, 14, 5, 9, 7000)
    assert format_date(moment, "SSS") == "7"
    assert format_date(moment, "SS") == "0"


def test_two_digit_year_keeps_leading_zero() -> None:
    assert format_date(datetime(2005, 6, 1), "YY") == "05"


def test_plain_date_is_treated_as_midnight() -> None:
    assert format_date(date(2024, 3, 5), "YYYY-MM-DD HH") == "2024-03-05 00"


def test_none_uses_current_time() -> None:
    assert format_date(None, "YYYY") == str(datetime.now().year)


def test_token_table_order_and_replace_flags() -> None:
    patterns = [token.pattern for token in FORMAT_TOKENS]
    assert patterns == [
        "a", "A", "ss", "s", "mm", "m", "hh", "h",
        "dddd", "ddd", "YYYY", "YY", "W", "SSS", "SS", "S", "S",
        "MMMM", "MMM", "MM", "M", "HH", "H", "H", "DDD", "DD", "D",
    ]
    replace_all = {token.pattern for token in FORMAT_TOKENS if token.replace_all}
    assert replace_all == {"a", "A", "ss", "s", "mm", "m", "hh", "h"}
    overwrites = [token.pattern for token in FORMAT_TOKENS if token.overwrites_previous]
    assert overwrites == ["S", "H"]
