"""
FastAPI REST API for the French workday calculator.
"""

import logging
from datetime import date
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from french_workdays import __version__
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


# API Models
class CalculateRequest(BaseModel):
    """Request model for workday calculation."""

    start_date: date = Field(..., description="First day of the period (inclusive)")
    end_date: date = Field(..., description="Day after the period (exclusive)")


class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    date: date
    name: str
    kind: str


class CalculateResponse(BaseModel):
    """Response model for workday calculation."""

    start_date: date
    end_date: date
    calendar_days: int
    weekend_days: int
    saturdays: int
    sundays: int
    holidays_count: int
    working_days: int
    working_days_by_year: Dict[int, int]
    holidays: List[HolidayResponse]


class HolidayCheckResponse(BaseModel):
    """Response model for a holiday check."""

    date: date
    is_holiday: bool
    name: Optional[str] = None


class EasterResponse(BaseModel):
    """Response model for Easter Sunday."""

    year: int
    easter_sunday: date


# FastAPI app
app = FastAPI(
    title="French Workday Calculator API",
    description="French public holidays and working days",
    version=__version__,
)


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "French Workday Calculator API",
        "version": __version__,
        "endpoints": {
            "POST /working-days": "Count working days in [start_date, end_date)",
            "GET /holidays/{year}": "Get holidays for a year",
            "GET /holidays/check/{date}": "Check whether a date is a holiday",
            "GET /easter/{year}": "Get the date of Easter Sunday",
        },
    }


@app.post("/working-days", response_model=CalculateResponse)
async def calculate_working_days(request: CalculateRequest):
    """
    Count working days between two dates.

    start_date is inclusive and end_date is exclusive.
    """
    if request.end_date < request.start_date:
        raise HTTPException(
            status_code=400,
            detail="end_date must be on or after start_date",
        )

    try:
        result = calculator.calculate(
            WorkdayRequest(start_date=request.start_date, end_date=request.end_date)
        )
    except ValueError as e:
        logger.warning("Rejected working-days request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return CalculateResponse(
        start_date=result.start_date,
        end_date=result.end_date,
        calendar_days=result.calendar_days,
        weekend_days=result.weekend_days,
        saturdays=result.weekends_detail.get("saturdays", 0),
        sundays=result.weekends_detail.get("sundays", 0),
        holidays_count=result.holidays_count,
        working_days=result.working_days,
        working_days_by_year=result.working_days_by_year,
        holidays=[
            HolidayResponse(date=h.holiday_date, name=h.name, kind=h.kind.value)
            for h in result.holidays
        ],
    )


@app.get("/holidays/check/{day}", response_model=HolidayCheckResponse)
async def check_holiday(day: date):
    """
    Check whether a date is a French public holiday.

    Args:
        day: Date in YYYY-MM-DD format
    """
    try:
        name = holiday_provider.get_holiday_name(day)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return HolidayCheckResponse(date=day, is_holiday=name is not None, name=name)


@app.get("/holidays/{year}", response_model=List[HolidayResponse])
async def get_holidays(year: int):
    """
    Get all holidays for a specific year.

    Args:
        year: Year (e.g., 2024, 2025)
    """
    try:
        holidays = holiday_provider.get_holidays(year)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return [
        HolidayResponse(date=h.holiday_date, name=h.name, kind=h.kind.value)
        for h in holidays
    ]


@app.get("/easter/{year}", response_model=EasterResponse)
async def get_easter(year: int):
    """Get the date of Easter Sunday for a year."""
    try:
        easter = calculate_easter_sunday(year)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return EasterResponse(year=year, easter_sunday=easter)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
