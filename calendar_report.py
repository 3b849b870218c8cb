"""Plain-text rendering of month grids and year statistics.

Every function returns a string; writing it somewhere is the caller's job.
"""

from __future__ import annotations

from calendar_logic import DAY_ABBR
from calendar_stats import MonthLayout, YearStatistics

BANNER_WIDTH = 60
SECTION_WIDTH = 50
STATS_WIDTH = 40
MONTH_RULE_WIDTH = 28
CELL_WIDTH = 3
PROGRESS_BAR_LENGTH = 30


def _rule(char: str, width: int) -> str:
    return char * width


def _flag(value: bool) -> str:
    return "TRUE" if value else "FALSE"


def render_banner() -> str:
    return "\n".join([
        _rule("=", BANNER_WIDTH),
        "GREGORIAN CALENDAR GENERATION SYSTEM",
        "Date Processing and Statistical Analysis",
        _rule("=", BANNER_WIDTH),
        "Features: Leap Year Calculation, Monthly Display, Statistics",
        "Algorithm: Zeller's Congruence for Day-of-Week Determination",
        _rule("=", BANNER_WIDTH),
    ])


def render_parameters(year: int) -> str:
    return "\n".join([
        "Calendar Generation Parameters Validated Successfully",
        f"Target Year: {year}",
        "Processing Mode: Complete Annual Calendar",
        _rule("=", BANNER_WIDTH),
    ])


def render_month_heading(layout: MonthLayout) -> str:
    return "\n".join([
        _rule("-", SECTION_WIDTH),
        f"PROCESSING MONTH: {layout.month} ({layout.name})",
        _rule("-", SECTION_WIDTH),
    ])


def _format_row(row: list[int | None]) -> str:
    cells = list(row)
    # trailing blanks of the last week are not printed
    while cells and cells[-1] is None:
        cells.pop()
    return "".join(" " * CELL_WIDTH if d is None else f"{d:>{CELL_WIDTH}}" for d in cells)


def render_month(layout: MonthLayout, analysis: bool = True) -> str:
    """Render one month as a Sunday-first grid, optionally followed by its analysis.

    The "Weekends" line is the row-count estimate and the "Weekend Days"
    line the exact count; for most months they differ.
    """
    lines = [
        f"{layout.name:>20} {layout.year}",
        _rule("-", MONTH_RULE_WIDTH),
        " " + " ".join(DAY_ABBR),
    ]
    lines.extend(_format_row(row) for row in layout.grid)
    if not analysis:
        return "\n".join(lines)
    lines.extend([
        "",
        "Month Analysis:",
        f"  Total Days: {layout.length}",
        f"  Starting Day: {layout.first_weekday} (0=Sunday)",
        f"  Weekends (estimate): {layout.estimated_weekends}",
        f"  Weekend Days (exact): {layout.weekend_days}",
    ])
    return "\n".join(lines)


def render_progress(current: int, total: int) -> str:
    """Render the `Generation Progress` line and a fixed-width bar."""
    percentage = 100.0 * current / total
    completed = current * PROGRESS_BAR_LENGTH // total
    bar = "=" * completed + " " * (PROGRESS_BAR_LENGTH - completed)
    return "\n".join([
        f"Generation Progress: {current}/{total} ({percentage:.0f}%)",
        f"Progress Bar: [{bar}]",
    ])


def render_statistics_heading() -> str:
    return "\n".join([
        _rule("=", BANNER_WIDTH),
        "EXECUTING CALENDAR STATISTICAL ANALYSIS",
        _rule("=", BANNER_WIDTH),
    ])


def render_statistics(stats: YearStatistics) -> str:
    return "\n".join([
        "ANNUAL CALENDAR STATISTICS REPORT",
        _rule("-", STATS_WIDTH),
        f"Target Year: {stats.year}",
        f"Leap Year Status: {_flag(stats.is_leap)}",
        f"Total Days: {stats.total_days}",
        f"Weekend Days: {stats.weekend_days}",
        f"Weekday Count: {stats.weekday_count}",
        f"Weekend Percentage: {stats.weekend_percentage:.1f}%",
        "",
        "Month Length Distribution:",
        f"  Shortest Month: {stats.shortest} days",
        f"  Longest Month: {stats.longest} days",
        f"  Average Month Length: {stats.average_length:.1f} days",
    ])


def render_summary(year: int, months: int, is_leap: bool) -> str:
    return "\n".join([
        _rule("=", BANNER_WIDTH),
        "CALENDAR GENERATION COMPLETED SUCCESSFULLY",
        f"Year Processed: {year}",
        f"Months Generated: {months}",
        f"Leap Year Status: {_flag(is_leap)}",
        _rule("=", BANNER_WIDTH),
    ])


def render_error(exc: Exception) -> str:
    return f"ERROR: Invalid calendar parameters detected.\n{exc}"
