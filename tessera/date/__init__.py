"""Date helpers: calendar getters, the token formatter and the date splitter."""

from .format import FORMAT_TOKENS, FormatToken, format_date
from .getters import (
    DAYS_OF_WEEK,
    DAYS_OF_WEEK_ABBR,
    MONTHS_OF_YEAR,
    MONTHS_OF_YEAR_ABBR,
    OutOfRangeError,
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
from .split import SplitDate, split_date

__all__ = [
    "FORMAT_TOKENS",
    "FormatToken",
    "format_date",
    "DAYS_OF_WEEK",
    "DAYS_OF_WEEK_ABBR",
    "MONTHS_OF_YEAR",
    "MONTHS_OF_YEAR_ABBR",
    "OutOfRangeError",
    "as_datetime",
    "day_of_week_abbr",
    "day_of_week_name",
    "day_of_year",
    "iso_week_of_year",
    "month_abbr",
    "month_name",
    "quarter_of_year",
    "weekday_index",
    "SplitDate",
    "split_date",
]
