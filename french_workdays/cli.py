"""
CLI interface for the French workday calculator.
"""

import logging
import sys
from datetime import date, datetime
from typing import Optional

import click

from french_workdays import __version__
from french_workdays.config.manager import ConfigManager
from french_workdays.core.calculator import WorkdayCalculator
from french_workdays.core.easter import calculate_easter_sunday
from french_workdays.core.holiday_provider import HolidayProvider
from french_workdays.data.schemas import Config
from french_workdays.output.exporter import ResultExporter
from french_workdays.output.formatter import ConsoleFormatter

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_date(date_str: str) -> date:
    """Parse date string in various formats."""
    formats = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y"]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise ValueError(
        f"Invalid date format: {date_str}. Use YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY"
    )


def get_config(config_path: Optional[str]) -> Config:
    """Load configuration from file and environment."""
    return ConfigManager(config_path).load_config()


@click.group()
@click.version_option(version=__version__, prog_name="french-workdays")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
@click.pass_context
def main(ctx: click.Context, config: Optional[str], verbose: bool):
    """French Workday Calculator - French public holidays and working days."""
    try:
        cfg = get_config(config)
    except ValueError as e:
        ConsoleFormatter().print_error(str(e))
        sys.exit(1)

    logging.basicConfig(level=cfg.log_level, format=LOG_FORMAT)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    logger.debug("Using configuration: %s", cfg)

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


@main.command()
@click.option(
    "--start", "-s",
    required=True,
    help="First day, inclusive (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)",
)
@click.option(
    "--end", "-e",
    required=True,
    help="Day after the period, exclusive (YYYY-MM-DD, DD.MM.YYYY, or DD/MM/YYYY)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path (optional)",
)
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "csv", "both", "console"]),
    default=None,
    help="Output format (default: console, or the configured format with --output)",
)
@click.pass_context
def workdays(ctx: click.Context, start, end, output, format):
    """Count working days between START (inclusive) and END (exclusive)."""
    formatter = ConsoleFormatter()
    cfg: Config = ctx.obj["config"]

    if format is None:
        format = cfg.output_format if output else "console"

    try:
        start_date = parse_date(start)
        end_date = parse_date(end)

        calculator = WorkdayCalculator(HolidayProvider(cache_enabled=cfg.cache_enabled))
        result = calculator.calculate_simple(start_date, end_date)

        if format in ("console", "both"):
            formatter.print_result(result)

        if format in ("json", "csv", "both"):
            exporter = ResultExporter(output_directory=cfg.output_directory)

            if format == "json":
                path = exporter.export_json(result, output)
                formatter.print_success(f"Result saved to {path}")
            elif format == "csv":
                path = exporter.export_csv(result, output)
                formatter.print_success(f"Result saved to {path}")
            else:  # both
                json_path, csv_path = exporter.export_both(result)
                formatter.print_success(f"Results saved to:\n  - {json_path}\n  - {csv_path}")

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except OSError as e:
        formatter.print_error(f"Could not write output: {e}")
        sys.exit(1)


@main.command()
@click.option(
    "--year", "-y",
    type=int,
    default=None,
    help="Year to show holidays for (default: current year)",
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output CSV file path (optional)",
)
@click.pass_context
def holidays(ctx: click.Context, year, output):
    """List French public holidays for a year."""
    formatter = ConsoleFormatter()
    cfg: Config = ctx.obj["config"]

    try:
        if year is None:
            year = date.today().year

        holiday_list = HolidayProvider(cache_enabled=cfg.cache_enabled).get_holidays(year)
        formatter.print_holidays_for_year(year, holiday_list)

        if output:
            exporter = ResultExporter(output_directory=cfg.output_directory)
            path = exporter.export_holidays_csv(holiday_list, output)
            formatter.print_success(f"Holidays saved to {path}")

    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except OSError as e:
        formatter.print_error(f"Could not write output: {e}")
        sys.exit(1)


@main.command(name="is-holiday")
@click.argument("day")
@click.pass_context
def is_holiday_command(ctx: click.Context, day):
    """Check whether DAY is a French public holiday."""
    formatter = ConsoleFormatter()
    cfg: Config = ctx.obj["config"]

    try:
        check_date = parse_date(day)
        name = HolidayProvider(cache_enabled=cfg.cache_enabled).get_holiday_name(check_date)
        formatter.print_holiday_check(check_date, name)
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.argument("year", type=int)
def easter(year):
    """Show the date of Easter Sunday for YEAR."""
    formatter = ConsoleFormatter()

    try:
        formatter.print_easter(year, calculate_easter_sunday(year))
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@click.pass_context
def serve(ctx: click.Context, host, port):
    """Start the FastAPI server."""
    import uvicorn

    formatter = ConsoleFormatter()
    cfg: Config = ctx.obj["config"]

    api_host = host or cfg.api_host
    api_port = port or cfg.api_port

    formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
    formatter.console.print("Press Ctrl+C to stop")
    formatter.console.print()

    uvicorn.run(
        "french_workdays.api:app",
        host=api_host,
        port=api_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
