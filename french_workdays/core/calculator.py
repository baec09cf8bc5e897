"""
Main workday calculator logic.
"""

import logging
from datetime import date, timedelta
from typing import Dict, Mapping, Optional

from french_workdays.core.errors import InvalidDateRangeError
from french_workdays.core.holiday_provider import HolidayProvider
from french_workdays.data.schemas import WorkdayRequest, WorkdayResult

logger = logging.getLogger(__name__)


class WorkdayCalculator:
    """Calculates working days considering weekends and French public holidays."""

    def __init__(self, holiday_provider: Optional[HolidayProvider] = None):
        """
        Initialize the workday calculator.

        Args:
            holiday_provider: Provider for holiday information (created if not provided).
        """
        self.holiday_provider = holiday_provider or HolidayProvider()

    def is_working_day(self, check_date: date) -> bool:
        """
        Check whether a date is a working day (Monday-Friday, not a holiday).

        Args:
            check_date: Date to check.

        Returns:
            True if the date is a working day.
        """
        if check_date.weekday() >= 5:
            return False
        return not self.holiday_provider.is_holiday(check_date)

    def count_working_days(self, start_date: date, end_date: date) -> int:
        """
        Count working days in [start_date, end_date).

        Args:
            start_date: First day of the period (inclusive).
            end_date: Day after the period (exclusive).

        Returns:
            Number of days that are neither weekend days nor holidays.

        Raises:
            InvalidDateRangeError: If start_date is after end_date.
        """
        return sum(self._scan(start_date, end_date).values())

    def _scan(self, start_date: date, end_date: date) -> Dict[int, int]:
        """Scan [start_date, end_date) day by day, counting working days per year."""
        if start_date > end_date:
            raise InvalidDateRangeError(start_date, end_date)

        per_year: Dict[int, int] = {}
        year = None
        holidays: Mapping[date, str] = {}

        current = start_date
        while current < end_date:
            if current.year != year:
                year = current.year
                holidays = self.holiday_provider.get_holidays_for_year(year)
                per_year[year] = 0
            if current.weekday() < 5 and current not in holidays:
                per_year[year] += 1
            current += timedelta(days=1)

        logger.debug("Scanned %s to %s: %s", start_date, end_date, per_year)
        return per_year

    def calculate(self, request: WorkdayRequest) -> WorkdayResult:
        """
        Calculate working days for a given request.

        Args:
            request: WorkdayRequest with a half-open date range.

        Returns:
            WorkdayResult with calculated working days and breakdown.
        """
        start, end = request.start_date, request.end_date

        working_days_by_year = self._scan(start, end)
        holidays = self.holiday_provider.get_holidays_for_range(start, end)

        calendar_days = (end - start).days

        # Count weekend days
        saturdays = 0
        sundays = 0
        current = start
        while current < end:
            weekday = current.weekday()
            if weekday == 5:  # Saturday
                saturdays += 1
            elif weekday == 6:  # Sunday
                sundays += 1
            current += timedelta(days=1)

        holidays_on_workdays = len({h.holiday_date for h in holidays if not h.is_weekend})

        return WorkdayResult(
            start_date=start,
            end_date=end,
            calendar_days=calendar_days,
            weekend_days=saturdays + sundays,
            holidays_count=holidays_on_workdays,
            working_days=sum(working_days_by_year.values()),
            working_days_by_year=working_days_by_year,
            holidays=holidays,
            weekends_detail={"saturdays": saturdays, "sundays": sundays},
        )

    def calculate_simple(self, start_date: date, end_date: date) -> WorkdayResult:
        """
        Simplified calculation method for CLI usage.

        Args:
            start_date: First day of the period (inclusive).
            end_date: Day after the period (exclusive).

        Returns:
            WorkdayResult with calculated working days.
        """
        if start_date > end_date:
            raise InvalidDateRangeError(start_date, end_date)
        return self.calculate(WorkdayRequest(start_date=start_date, end_date=end_date))


def get_working_days(start_inclusive: date, end_exclusive: date) -> int:
    """
    Count French working days in [start_inclusive, end_exclusive).

    Uses a fresh provider per call, so holiday sets are computed once per
    distinct year in the range and then discarded.
    """
    return WorkdayCalculator(HolidayProvider()).count_working_days(start_inclusive, end_exclusive)
