"""
Models package for the Holiday API
Pydantic models for stored holidays and the action request variants.
"""

from .holiday import (
    Holiday,
    HolidayCreate,
    GetHolidaysRequest,
    AddHolidayRequest,
    DeleteHolidayRequest,
    HolidayAction,
    InvalidRequestError,
    parse_action,
)

__all__ = [
    "Holiday",
    "HolidayCreate",
    "GetHolidaysRequest",
    "AddHolidayRequest",
    "DeleteHolidayRequest",
    "HolidayAction",
    "InvalidRequestError",
    "parse_action",
]
