"""Pure Gregorian calendar calculations — no output, no I/O."""

from __future__ import annotations

from loguru import logger

DAY_ABBR = ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_MONTH_DAYS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

YEAR_MIN = 1900
YEAR_MAX = 2100

SUNDAY = 0
SATURDAY = 6


class CalendarError(ValueError):
    """Base class for rejected calendar input."""


class InvalidMonth(CalendarError):
    def __init__(self, month: int) -> None:
        super().__init__(f"month must be in 1..12, got {month}")
        self.month = month


class InvalidDay(CalendarError):
    def __init__(self, day: int, month: int, year: int) -> None:
        super().__init__(f"day {day} does not exist in {year}-{month:02d}")
        self.day = day
        self.month = month
        self.year = year


class InvalidYearRange(CalendarError):
    def __init__(self, year: int) -> None:
        super().__init__(f"year must be in {YEAR_MIN}..{YEAR_MAX}, got {year}")
        self.year = year


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidMonth(month)


def is_leap_year(year: int) -> bool:
    """Return True if *year* is a Gregorian leap year.

    Divisible by 400 -> leap; else divisible by 100 -> common;
    else divisible by 4 -> leap. Works for zero and negative years too.
    """
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def month_length(month: int, year: int) -> int:
    """Return the number of days in the given month (28–31)."""
    _check_month(month)
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def weekday_of_first(month: int, year: int) -> int:
    """Return the weekday of day 1 of the month, 0=Sunday … 6=Saturday.

    Zeller's congruence: January and February count as months 13 and 14
    of the previous year. The raw result has 0=Saturday and is shifted
    to the Sunday-based convention.
    """
    _check_month(month)
    if month < 3:
        month += 12
        year -= 1
    century, yy = divmod(year, 100)
    h = (1 + (13 * (month + 1)) // 5 + yy + yy // 4 + century // 4 - 2 * century) % 7
    return (h + 6) % 7


def month_name(month: int) -> str:
    """Return the English month name."""
    _check_month(month)
    return MONTH_NAMES[month - 1]


def day_of_year(day: int, month: int, year: int) -> int:
    """Return the 1-based day-of-year for the given date."""
    if not 1 <= day <= month_length(month, year):
        raise InvalidDay(day, month, year)
    return sum(month_length(m, year) for m in range(1, month)) + day


def is_weekend(weekday: int) -> bool:
    return weekday in (SUNDAY, SATURDAY)


def weekend_days_in_month(month: int, year: int) -> int:
    """Exact count of Saturdays and Sundays in the month."""
    start = weekday_of_first(month, year)
    return sum(
        1 for day in range(1, month_length(month, year) + 1)
        if is_weekend((start + day - 1) % 7)
    )


def estimated_weekends(month: int, year: int) -> int:
    """Number of calendar rows the month spans: ceil((length + start) / 7).

    Shown as the month's "weekends" figure. It approximates the number of
    weekends touched, so it does not match weekend_days_in_month().
    """
    return (month_length(month, year) + weekday_of_first(month, year) + 6) // 7


def month_grid(month: int, year: int) -> list[list[int | None]]:
    """Return the month as rows of 7 cells, weeks starting on Sunday.

    Each cell is a day number or None for the leading/trailing blanks.
    Rows break every 7 cells counted from the start of the grid, so the
    leading blanks belong to the first row.
    """
    start = weekday_of_first(month, year)
    cells: list[int | None] = [None] * start
    cells.extend(range(1, month_length(month, year) + 1))
    if len(cells) % 7:
        cells.extend([None] * (7 - len(cells) % 7))
    grid = [cells[i:i + 7] for i in range(0, len(cells), 7)]
    logger.debug("grid {}-{:02d}: start={} rows={}", year, month, start, len(grid))
    return grid


def validate_date_input(month: int, year: int) -> None:
    """Reject a month outside 1..12 or a year outside the supported range."""
    _check_month(month)
    if not YEAR_MIN <= year <= YEAR_MAX:
        raise InvalidYearRange(year)
