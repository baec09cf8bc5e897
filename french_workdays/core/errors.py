"""
Errors raised by the calendar core.

All of them derive from ValueError so callers that already guard against
invalid input with ``except ValueError`` keep working.
"""


class CalendarError(ValueError):
    """Base class for invalid calendar input."""


class InvalidYearError(CalendarError):
    """Year outside the supported Gregorian range."""

    def __init__(self, year, min_year: int, max_year: int):
        self.year = year
        super().__init__(f"Year must be an integer between {min_year} and {max_year}, got {year!r}")


class InvalidDateRangeError(CalendarError):
    """Start date after end date."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"start date {start} is after end date {end}")
