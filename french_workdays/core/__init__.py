"""
Core business logic for French holiday and workday calculation.
"""

from french_workdays.core.calculator import WorkdayCalculator, get_working_days
from french_workdays.core.easter import calculate_easter_sunday
from french_workdays.core.errors import (
    CalendarError,
    InvalidDateRangeError,
    InvalidYearError,
)
from french_workdays.core.holiday_provider import (
    HolidayProvider,
    get_holidays_for_year,
    is_holiday,
)

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
