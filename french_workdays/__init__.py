"""
French public holidays and working-day counting.
"""

from french_workdays.core import (
    CalendarError,
    HolidayProvider,
    InvalidDateRangeError,
    InvalidYearError,
    WorkdayCalculator,
    calculate_easter_sunday,
    get_holidays_for_year,
    get_working_days,
    is_holiday,
)

__version__ = "0.1.0"

__all__ = [
    "CalendarError",
    "HolidayProvider",
    "InvalidDateRangeError",
    "InvalidYearError",
    "WorkdayCalculator",
    "calculate_easter_sunday",
    "get_holidays_for_year",
    "get_working_days",
    "is_holiday",
]
