"""
Tests for the workday calculator.
"""

from datetime import date, timedelta

import pytest

from french_workdays import get_working_days
from french_workdays.core.calculator import WorkdayCalculator
from french_workdays.core.errors import InvalidDateRangeError, InvalidYearError
from french_workdays.core.holiday_provider import HolidayProvider
from french_workdays.data.schemas import WorkdayRequest


@pytest.fixture
def calculator():
    """Create a WorkdayCalculator instance."""
    return WorkdayCalculator(HolidayProvider())


class TestGetWorkingDays:
    """Tests for the module-level get_working_days function."""

    def test_year_2023_regression(self):
        """Working days from 01.01.2023 (inclusive) to 31.12.2023 (exclusive)."""
        assert get_working_days(date(2023, 1, 1), date(2023, 12, 31)) == 251

    def test_empty_range(self):
        """Same start and end yields zero."""
        assert get_working_days(date(2024, 1, 1), date(2024, 1, 1)) == 0

    @pytest.mark.parametrize(
        "day",
        [date(2023, 5, 1), date(2023, 6, 7), date(2024, 2, 29), date(2025, 12, 27)],
    )
    def test_same_day_is_zero(self, day):
        """A range with start == end is always empty."""
        assert get_working_days(day, day) == 0

    def test_inverted_range_raises(self):
        """Start after end fails instead of returning a count."""
        with pytest.raises(InvalidDateRangeError):
            get_working_days(date(2024, 1, 2), date(2024, 1, 1))

    def test_inverted_range_is_value_error(self):
        """Range errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            get_working_days(date(2024, 3, 1), date(2024, 2, 1))

    def test_end_is_exclusive(self):
        """The end date itself is never counted."""
        # Tuesday 2023-06-06 to Wednesday 2023-06-07
        assert get_working_days(date(2023, 6, 6), date(2023, 6, 7)) == 1

    def test_holiday_not_counted(self):
        """A weekday holiday is excluded."""
        # Monday 2023-05-01, Fete du travail
        assert get_working_days(date(2023, 5, 1), date(2023, 5, 2)) == 0

    def test_full_week(self):
        """A plain week has five working days."""
        assert get_working_days(date(2023, 6, 5), date(2023, 6, 12)) == 5

    def test_may_2023(self):
        """May 2023 has four weekday holidays."""
        # 23 weekdays minus 1st, 8th, 18th and 29th
        assert get_working_days(date(2023, 5, 1), date(2023, 6, 1)) == 19

    def test_spanning_years(self):
        """Each day is checked against its own year's holidays."""
        # 25.12.2023 (Mon, Noel) .. 01.01.2024 (Mon, Jour de l'an)
        assert get_working_days(date(2023, 12, 25), date(2024, 1, 2)) == 4

    @pytest.mark.parametrize(
        "d1, d2, d3",
        [
            (date(2023, 1, 1), date(2023, 5, 18), date(2023, 12, 31)),
            (date(2022, 11, 15), date(2023, 1, 1), date(2024, 4, 2)),
            (date(2024, 2, 28), date(2024, 2, 28), date(2024, 3, 5)),
            (date(2020, 1, 1), date(2024, 7, 14), date(2024, 7, 14)),
        ],
    )
    def test_additive_over_subranges(self, d1, d2, d3):
        """Counts over contiguous sub-ranges add up."""
        assert get_working_days(d1, d3) == get_working_days(d1, d2) + get_working_days(d2, d3)

    def test_year_before_gregorian_range_raises(self):
        """Days before 1583 cannot be classified."""
        with pytest.raises(InvalidYearError):
            get_working_days(date(1582, 12, 30), date(1583, 1, 3))


class TestWorkdayCalculator:
    """Tests for WorkdayCalculator."""

    def test_is_working_day(self, calculator):
        """Weekends and holidays are not working days."""
        assert calculator.is_working_day(date(2023, 6, 6)) is True  # Tuesday
        assert calculator.is_working_day(date(2023, 6, 10)) is False  # Saturday
        assert calculator.is_working_day(date(2023, 6, 11)) is False  # Sunday
        assert calculator.is_working_day(date(2023, 7, 14)) is False  # Friday, holiday

    def test_count_matches_day_by_day(self, calculator):
        """count_working_days agrees with classifying each day."""
        start, end = date(2024, 3, 1), date(2024, 6, 1)
        expected = sum(
            1
            for n in range((end - start).days)
            if calculator.is_working_day(start + timedelta(days=n))
        )
        assert calculator.count_working_days(start, end) == expected

    def test_calculate_full_year_2023(self, calculator):
        """Breakdown for the whole of 2023."""
        request = WorkdayRequest(start_date=date(2023, 1, 1), end_date=date(2024, 1, 1))

        result = calculator.calculate(request)

        assert result.calendar_days == 365
        assert result.weekends_detail == {"saturdays": 52, "sundays": 53}
        assert result.weekend_days == 105
        assert len(result.holidays) == 11
        assert result.holidays_count == 9  # 01.01 and 11.11 fall on weekends
        assert result.working_days == 251
        assert result.working_days_by_year == {2023: 251}

    def test_calculate_full_year_2008(self, calculator):
        """Ascension on May 1st counts as one holiday."""
        request = WorkdayRequest(start_date=date(2008, 1, 1), end_date=date(2009, 1, 1))

        result = calculator.calculate(request)

        assert result.calendar_days == 366
        assert result.weekend_days == 104
        assert len(result.holidays) == 10
        assert result.holidays_count == 9  # 01.11 falls on a Saturday
        assert result.working_days == 253

    @pytest.mark.parametrize(
        "year", [1603, 1614, 1997, 2008, 2019, 2023, 2024, 2038, 2285, 9998]
    )
    def test_breakdown_adds_up(self, calculator, year):
        """Calendar days split into weekend days, weekday holidays and working days."""
        request = WorkdayRequest(start_date=date(year, 1, 1), end_date=date(year + 1, 1, 1))

        result = calculator.calculate(request)

        assert (
            result.calendar_days - result.weekend_days - result.holidays_count
            == result.working_days
        )

    def test_breakdown_adds_up_across_years(self, calculator):
        """The identity holds over a multi-year range with a collision year."""
        request = WorkdayRequest(start_date=date(2005, 3, 15), end_date=date(2011, 8, 20))

        result = calculator.calculate(request)

        assert (
            result.calendar_days - result.weekend_days - result.holidays_count
            == result.working_days
        )

    def test_calculate_year_boundary(self, calculator):
        """Calculation spanning a year boundary splits the count per year."""
        request = WorkdayRequest(start_date=date(2023, 12, 25), end_date=date(2024, 1, 2))

        result = calculator.calculate(request)

        assert result.calendar_days == 8
        assert result.working_days == 4
        assert result.working_days_by_year == {2023: 4, 2024: 0}
        holiday_dates = [h.holiday_date for h in result.holidays]
        assert holiday_dates == [date(2023, 12, 25), date(2024, 1, 1)]
        assert result.holidays_count == 2

    def test_calculate_empty_range(self, calculator):
        """An empty range produces an all-zero result."""
        request = WorkdayRequest(start_date=date(2024, 1, 1), end_date=date(2024, 1, 1))

        result = calculator.calculate(request)

        assert result.calendar_days == 0
        assert result.weekend_days == 0
        assert result.working_days == 0
        assert result.holidays == []
        assert result.working_days_by_year == {}

    def test_calculate_empty_range_outside_supported_years(self, calculator):
        """An empty range never looks up a holiday set, like count_working_days."""
        request = WorkdayRequest(start_date=date(1500, 1, 1), end_date=date(1500, 1, 1))

        result = calculator.calculate(request)

        assert result.working_days == 0
        assert result.holidays == []
        assert calculator.count_working_days(date(1500, 1, 1), date(1500, 1, 1)) == 0

    def test_calculate_simple_inverted_range(self, calculator):
        """calculate_simple rejects start after end."""
        with pytest.raises(InvalidDateRangeError):
            calculator.calculate_simple(date(2024, 1, 5), date(2024, 1, 1))

    def test_request_rejects_inverted_range(self):
        """WorkdayRequest validation rejects start after end."""
        with pytest.raises(ValueError, match="end_date must be on or after start_date"):
            WorkdayRequest(start_date=date(2024, 1, 5), end_date=date(2024, 1, 1))

    def test_uses_provider_cache(self):
        """A scan over several years fills the provider cache once per year."""
        provider = HolidayProvider(cache_enabled=True)
        calculator = WorkdayCalculator(provider)

        calculator.count_working_days(date(2022, 6, 1), date(2024, 6, 1))

        assert sorted(provider._cache) == [2022, 2023, 2024]

    def test_default_provider(self):
        """A calculator without an explicit provider creates one."""
        calculator = WorkdayCalculator()
        assert isinstance(calculator.holiday_provider, HolidayProvider)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
