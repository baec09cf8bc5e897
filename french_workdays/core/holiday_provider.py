"""
Holiday provider computing French public holidays.
"""

import logging
from datetime import date, timedelta
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from french_workdays.core.easter import calculate_easter_sunday, validate_year
from french_workdays.core.errors import InvalidDateRangeError
from french_workdays.data.holiday_data import EASTER_OFFSETS, FIXED_HOLIDAYS
from french_workdays.data.schemas import Holiday, HolidayKind

logger = logging.getLogger(__name__)


def build_holidays(year: int) -> List[Holiday]:
    """
    Build the list of French public holidays for a year.

    Args:
        year: Year to build holidays for.

    Returns:
        One holiday per date, sorted by date. When a movable feast falls on
        a fixed-date holiday (Ascension on May 1st or May 8th), the movable
        feast replaces it, so some years have 10 entries instead of 11.
    """
    validate_year(year)

    by_date: Dict[date, Holiday] = {
        date(year, month, day): Holiday(
            holiday_date=date(year, month, day), name=name, kind=HolidayKind.FIXED
        )
        for (month, day), name in FIXED_HOLIDAYS.items()
    }

    easter = calculate_easter_sunday(year)
    for offset, name in EASTER_OFFSETS.items():
        holiday_date = easter + timedelta(days=offset)
        if holiday_date in by_date:
            logger.debug("%s replaces %s on %s", name, by_date[holiday_date].name, holiday_date)
        by_date[holiday_date] = Holiday(
            holiday_date=holiday_date,
            name=name,
            kind=HolidayKind.MOVABLE,
            easter_offset=offset,
        )

    return sorted(by_date.values(), key=lambda h: h.holiday_date)


def get_holidays_for_year(year: int) -> Mapping[date, str]:
    """
    Return a read-only mapping of holiday dates to names for a year.

    Builds a fresh set on every call; use a HolidayProvider to cache.
    """
    return MappingProxyType({h.holiday_date: h.name for h in build_holidays(year)})


def is_holiday(check_date: date) -> bool:
    """Check whether a date is a French public holiday."""
    return check_date in get_holidays_for_year(check_date.year)


class HolidayProvider:
    """Provides French public holiday information with an optional per-year cache."""

    def __init__(self, cache_enabled: bool = True):
        """
        Initialize the holiday provider.

        Args:
            cache_enabled: Whether to keep computed holiday sets per year.
        """
        self.cache_enabled = cache_enabled
        self._cache: Dict[int, Mapping[date, str]] = {}

    def get_holidays_for_year(self, year: int) -> Mapping[date, str]:
        """
        Get the holiday set (date -> name) for a year.

        The returned mapping is read-only. With caching enabled, repeated calls
        for the same year return the same object.

        Args:
            year: Year to get holidays for.

        Returns:
            Mapping of holiday dates to names, ordered by date.

        Raises:
            InvalidYearError: If the year is outside the supported range.
        """
        if not self.cache_enabled:
            return get_holidays_for_year(year)

        cached = self._cache.get(year)
        if cached is not None:
            logger.debug("Holiday cache hit for %d", year)
            return cached

        logger.debug("Building holiday set for %d", year)
        # setdefault publishes once; a concurrent builder gets the first value
        return self._cache.setdefault(year, get_holidays_for_year(year))

    def get_holidays(self, year: int) -> List[Holiday]:
        """
        Get all holidays for a year as Holiday models.

        Args:
            year: Year to get holidays for.

        Returns:
            List of Holiday objects sorted by date.
        """
        return build_holidays(year)

    def get_holidays_for_range(self, start: date, end: date) -> List[Holiday]:
        """
        Get all holidays within [start, end).

        Args:
            start: First day of the range (inclusive).
            end: Day after the range (exclusive).

        Returns:
            List of Holiday objects within the range, sorted by date.

        Raises:
            InvalidDateRangeError: If start is after end.
        """
        if start > end:
            raise InvalidDateRangeError(start, end)
        if start == end:
            return []

        last_day = end - timedelta(days=1)
        result = []
        for year in range(start.year, last_day.year + 1):
            result.extend(
                h for h in self.get_holidays(year) if start <= h.holiday_date < end
            )
        return result

    def is_holiday(self, check_date: date) -> bool:
        """
        Check if a specific date is a holiday.

        Args:
            check_date: Date to check.

        Returns:
            True if the date is a holiday, False otherwise.
        """
        return check_date in self.get_holidays_for_year(check_date.year)

    def get_holiday_name(self, check_date: date) -> Optional[str]:
        """Return the holiday name for a date, or None if it is not a holiday."""
        return self.get_holidays_for_year(check_date.year).get(check_date)

    def clear_cache(self) -> None:
        """Clear the holiday cache."""
        self._cache.clear()
