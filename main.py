"""Entry point — validates the year, prints twelve month grids and the year report."""

import sys

import typer
from loguru import logger
from rich.console import Console

from calendar_logic import CalendarError, validate_date_input
from calendar_report import (
    render_banner,
    render_error,
    render_month,
    render_month_heading,
    render_parameters,
    render_progress,
    render_statistics,
    render_statistics_heading,
    render_summary,
)
from calendar_stats import MONTHS_PER_YEAR, aggregate_year, layout_year
from settings import load_settings

console = Console(highlight=False)

app = typer.Typer(
    name="calendar-report",
    help="Print a Gregorian calendar for one year with weekend and month-length statistics.",
    add_completion=False,
)


def _setup_logging(level: str = "WARNING") -> None:
    """Send log records to stderr so stdout carries only the report."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{file.name}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=level,
        colorize=True,
    )


def _emit(text: str = "") -> None:
    console.print(text, markup=False, soft_wrap=True)


def run(year: int, show_progress: bool = True, show_month_analysis: bool = True) -> None:
    """Validate *year*, then print every month and the statistics report.

    Raises CalendarError before printing anything but the banner if the
    year is outside the supported range.
    """
    _emit(render_banner())
    validate_date_input(1, year)
    _emit(render_parameters(year))

    layouts = layout_year(year)
    for layout in layouts:
        _emit()
        _emit(render_month_heading(layout))
        _emit()
        _emit(render_month(layout, analysis=show_month_analysis))
        if show_progress:
            _emit(render_progress(layout.month, MONTHS_PER_YEAR))

    stats = aggregate_year(year)
    logger.info(
        "{}: {} days, {} weekend days ({:.1f}%)",
        year, stats.total_days, stats.weekend_days, stats.weekend_percentage,
    )
    _emit()
    _emit(render_statistics_heading())
    _emit(render_statistics(stats))
    _emit()
    _emit(render_summary(year, len(layouts), stats.is_leap))


@app.command()
def main(
    year: int | None = typer.Option(None, "--year", "-y", help="Year to process (1900-2100)."),
    settings_file: str | None = typer.Option(None, "--settings", help="Path to a JSON settings file."),
    no_progress: bool = typer.Option(False, "--no-progress", help="Hide the per-month progress bar."),
    quiet_months: bool = typer.Option(False, "--quiet-months", help="Hide the per-month analysis block."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    settings = load_settings(settings_file)
    _setup_logging("DEBUG" if debug else settings["log_level"])

    target_year = settings["year"] if year is None else year
    try:
        run(
            target_year,
            show_progress=settings["show_progress"] and not no_progress,
            show_month_analysis=settings["show_month_analysis"] and not quiet_months,
        )
    except CalendarError as e:
        logger.error("Rejected calendar input: {}", e)
        console.print(render_error(e), markup=False, style="bold red")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
