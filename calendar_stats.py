"""Year-level aggregation and per-month layouts built on calendar_logic."""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from calendar_logic import (
    estimated_weekends,
    is_leap_year,
    is_weekend,
    month_grid,
    month_length,
    month_name,
    weekday_of_first,
    weekend_days_in_month,
)

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class YearStatistics:
    """Aggregate figures for one year."""

    year: int
    is_leap: bool
    total_days: int
    weekend_days: int
    weekday_count: int
    month_lengths: tuple[int, ...]  # sorted ascending
    shortest: int
    longest: int
    average_length: float
    weekend_percentage: float


@dataclass(frozen=True)
class MonthLayout:
    """Everything needed to print one month, computed up front."""

    year: int
    month: int
    name: str
    length: int
    first_weekday: int
    grid: list[list[int | None]]
    weekend_days: int
    estimated_weekends: int


def aggregate_year(year: int) -> YearStatistics:
    """Walk all twelve months and collect day, weekend and length statistics."""
    total_days = 0
    weekend_days = 0
    lengths: list[int] = []

    for month in range(1, MONTHS_PER_YEAR + 1):
        length = month_length(month, year)
        start = weekday_of_first(month, year)
        total_days += length
        lengths.append(length)

        month_weekends = 0
        for day in range(1, length + 1):
            if is_weekend((start + day - 1) % 7):
                month_weekends += 1
        weekend_days += month_weekends
        logger.debug(
            "{}-{:02d}: {} days, starts on {}, {} weekend days",
            year, month, length, start, month_weekends,
        )

    lengths.sort()
    weekend_percentage = 100.0 * weekend_days / total_days if total_days else 0.0

    return YearStatistics(
        year=year,
        is_leap=is_leap_year(year),
        total_days=total_days,
        weekend_days=weekend_days,
        weekday_count=total_days - weekend_days,
        month_lengths=tuple(lengths),
        shortest=lengths[0],
        longest=lengths[-1],
        average_length=total_days / float(MONTHS_PER_YEAR),
        weekend_percentage=weekend_percentage,
    )


def layout_month(month: int, year: int) -> MonthLayout:
    return MonthLayout(
        year=year,
        month=month,
        name=month_name(month),
        length=month_length(month, year),
        first_weekday=weekday_of_first(month, year),
        grid=month_grid(month, year),
        weekend_days=weekend_days_in_month(month, year),
        estimated_weekends=estimated_weekends(month, year),
    )


def layout_year(year: int) -> list[MonthLayout]:
    """Return layouts for January through December."""
    return [layout_month(m, year) for m in range(1, MONTHS_PER_YEAR + 1)]
