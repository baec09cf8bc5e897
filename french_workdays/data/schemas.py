"""
Data models for the French workday calculator using Pydantic.
"""

from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class HolidayKind(str, Enum):
    """How a holiday's date is determined."""

    FIXED = "fixed"  # Same month/day every year
    MOVABLE = "movable"  # Offset from Easter Sunday


class Holiday(BaseModel):
    """Represents a French public holiday."""

    holiday_date: date = Field(..., description="Date of the holiday")
    name: str = Field(..., description="Name of the holiday in French")
    kind: HolidayKind = Field(default=HolidayKind.FIXED, description="Fixed-date or Easter-derived")
    easter_offset: Optional[int] = Field(
        default=None, description="Days after Easter Sunday (movable feasts only)"
    )

    @property
    def is_weekend(self) -> bool:
        """Whether the holiday falls on a Saturday or Sunday."""
        return self.holiday_date.weekday() >= 5


class WorkdayRequest(BaseModel):
    """Request model for workday calculation over [start_date, end_date)."""

    start_date: date = Field(..., description="First day of the period (inclusive)")
    end_date: date = Field(..., description="Day after the period (exclusive)")

    @field_validator("end_date")
    @classmethod
    def validate_date_range(cls, v: date, info) -> date:
        """Ensure end_date is not before start_date."""
        if "start_date" in info.data and v < info.data["start_date"]:
            raise ValueError("end_date must be on or after start_date")
        return v


class WorkdayResult(BaseModel):
    """Complete result of workday calculation."""

    start_date: date = Field(..., description="First day of the period (inclusive)")
    end_date: date = Field(..., description="Day after the period (exclusive)")
    calendar_days: int = Field(..., ge=0, description="Total calendar days in range")
    weekend_days: int = Field(..., ge=0, description="Number of Saturdays and Sundays")
    holidays_count: int = Field(..., ge=0, description="Number of holidays on weekdays")
    working_days: int = Field(..., ge=0, description="Calculated working days")
    working_days_by_year: Dict[int, int] = Field(
        default_factory=dict, description="Working days split per calendar year"
    )
    holidays: List[Holiday] = Field(default_factory=list, description="Holidays in the range")
    weekends_detail: Dict[str, int] = Field(
        default_factory=dict, description="Breakdown of Saturdays and Sundays"
    )
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )


class Config(BaseModel):
    """Configuration for the French workday calculator."""

    cache_enabled: bool = Field(default=True, description="Cache holiday sets per year")
    output_format: str = Field(default="json", description="Default output format: json or csv")
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Only json and csv exports are supported."""
        if v not in ("json", "csv"):
            raise ValueError("output_format must be 'json' or 'csv'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level
