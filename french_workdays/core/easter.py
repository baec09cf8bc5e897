"""
Easter Sunday calculation for the Gregorian calendar.
"""

from datetime import date

from french_workdays.core.errors import InvalidYearError
from french_workdays.data.holiday_data import MAX_YEAR, MIN_YEAR


def validate_year(year: int) -> int:
    """
    Check that a year is supported by the calendar computations.

    Args:
        year: Year to check.

    Returns:
        The year, unchanged.

    Raises:
        InvalidYearError: If the year is not an int in [MIN_YEAR, MAX_YEAR].
    """
    # bool is an int subclass but never a meaningful year
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearError(year, MIN_YEAR, MAX_YEAR)
    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidYearError(year, MIN_YEAR, MAX_YEAR)
    return year


def calculate_easter_sunday(year: int) -> date:
    """
    Calculate the date of Easter Sunday using the Meeus/Jones/Butcher algorithm.

    Args:
        year: Gregorian year.

    Returns:
        Date of Easter Sunday (always between March 22 and April 25).

    Raises:
        InvalidYearError: If the year is outside the supported range.
    """
    validate_year(year)

    a = year % 19  # Golden number - 1
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30  # Epact-related
    i = c // 4
    j = c % 4
    k = (32 + 2 * e + 2 * i - h - j) % 7
    l = (a + 11 * h + 22 * k) // 451
    m = h + k - 7 * l + 114

    month = m // 31
    day = (m % 31) + 1
    return date(year, month, day)
