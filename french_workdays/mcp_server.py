"""
MCP Server for the French Workday Calculator.

This module provides an MCP (Model Context Protocol) server that exposes
the French holiday and working-day functionality to MCP clients.

Supports two transport modes:
- stdio: For local desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from datetime import date

from mcp.server.fastmcp import FastMCP

from french_workdays.config.manager import ConfigManager
from french_workdays.core.calculator import WorkdayCalculator
from french_workdays.core.easter import calculate_easter_sunday
from french_workdays.core.holiday_provider import HolidayProvider
from french_workdays.data.schemas import WorkdayRequest

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
holiday_provider = HolidayProvider(cache_enabled=config.cache_enabled)
calculator = WorkdayCalculator(holiday_provider)


def calculate_working_days(start_date: str, end_date: str) -> dict:
    """
    Calculate French working days between two dates.

    Working days are Monday to Friday, excluding French public holidays.
    The start date is inclusive and the end date is exclusive.

    Args:
        start_date: First day in format YYYY-MM-DD (e.g., "2023-01-01")
        end_date: Day after the period in format YYYY-MM-DD (e.g., "2024-01-01")

    Returns:
        Dictionary with working_days, calendar_days, weekend_days,
        holidays_count, working_days_by_year and the holidays in range.

    Examples:
        >>> calculate_working_days("2023-01-01", "2023-12-31")
    """
    try:
        start = date.fromisoformat(start_date)
        end = date.fromisoformat(end_date)
    except ValueError as e:
        return {"error": f"Invalid date format. Use YYYY-MM-DD. Details: {str(e)}"}

    if end < start:
        return {"error": "end_date must be on or after start_date"}

    try:
        result = calculator.calculate(WorkdayRequest(start_date=start, end_date=end))
    except ValueError as e:
        return {"error": str(e)}

    return {
        "working_days": result.working_days,
        "calendar_days": result.calendar_days,
        "weekend_days": result.weekend_days,
        "saturdays": result.weekends_detail.get("saturdays", 0),
        "sundays": result.weekends_detail.get("sundays", 0),
        "holidays_count": result.holidays_count,
        "working_days_by_year": {
            str(year): count for year, count in result.working_days_by_year.items()
        },
        "holidays": [
            {"date": h.holiday_date.isoformat(), "name": h.name, "kind": h.kind.value}
            for h in result.holidays
        ],
        "start_date": result.start_date.isoformat(),
        "end_date": result.end_date.isoformat(),
    }


def get_holidays(year: int) -> dict:
    """
    Get all French public holidays for a year.

    Args:
        year: Year to get holidays for (e.g., 2023)

    Returns:
        Dictionary with the year, the holiday count and the holidays
        (date, name, kind).
    """
    try:
        holidays = holiday_provider.get_holidays(year)
    except ValueError as e:
        return {"error": str(e)}

    return {
        "year": year,
        "holiday_count": len(holidays),
        "holidays": [
            {
                "date": h.holiday_date.isoformat(),
                "name": h.name,
                "kind": h.kind.value,
            }
            for h in holidays
        ],
    }


def check_holiday(day: str) -> dict:
    """
    Check whether a date is a French public holiday.

    Args:
        day: Date in format YYYY-MM-DD (e.g., "2023-05-01")

    Returns:
        Dictionary with date, is_holiday and the holiday name (or null).
    """
    try:
        check_date = date.fromisoformat(day)
        name = holiday_provider.get_holiday_name(check_date)
    except ValueError as e:
        return {"error": str(e)}

    return {"date": check_date.isoformat(), "is_holiday": name is not None, "name": name}


def get_easter_sunday(year: int) -> dict:
    """
    Get the date of Easter Sunday for a year (Gregorian calendar).

    Args:
        year: Year between 1583 and 9999

    Returns:
        Dictionary with year and easter_sunday in YYYY-MM-DD format.
    """
    try:
        easter = calculate_easter_sunday(year)
    except ValueError as e:
        return {"error": str(e)}

    return {"year": year, "easter_sunday": easter.isoformat()}


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("French Workday Calculator", host=host, port=port)

    mcp.tool()(calculate_working_days)
    mcp.tool()(get_holidays)
    mcp.tool()(check_holiday)
    mcp.tool()(get_easter_sunday)

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="French Workday Calculator MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", os.environ.get("FASTMCP_HOST", "0.0.0.0")),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", os.environ.get("FASTMCP_PORT", "8080"))),
        help="Port to listen on (SSE mode only, default: 8080)",
    )

    args = parser.parse_args()

    mcp = create_mcp_server(host=args.host, port=args.port)
    logger.info("Starting MCP server with %s transport", args.transport)
    mcp.run(transport=args.transport)


if __name__ == "__main__":
    main()
