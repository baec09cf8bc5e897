"""
Data models and static tables for the French workday calculator.
"""

from french_workdays.data.schemas import (
    Config,
    Holiday,
    HolidayKind,
    WorkdayRequest,
    WorkdayResult,
)

__all__ = [
    "Config",
    "Holiday",
    "HolidayKind",
    "WorkdayRequest",
    "WorkdayResult",
]
