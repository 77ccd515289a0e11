from datetime import datetime, timezone
from typing import Any, Dict, Literal, Union

from bson import ObjectId
from pydantic import BaseModel, Field


class InvalidRequestError(Exception):
    """Request body rejected before reaching the database."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Holiday(BaseModel):
    """Holiday as returned to clients"""
    id: str
    date: str
    reason: str

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Holiday":
        return cls(id=str(doc["_id"]), date=doc["date"], reason=doc["reason"])


class HolidayCreate(BaseModel):
    """Document written on insert"""
    date: str
    reason: str
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="createdAt"
    )

    class Config:
        populate_by_name = True


class GetHolidaysRequest(BaseModel):
    action: Literal["get_holidays"] = "get_holidays"


class AddHolidayRequest(BaseModel):
    action: Literal["add_holiday"] = "add_holiday"
    date: str
    reason: str


class DeleteHolidayRequest(BaseModel):
    action: Literal["delete_holiday"] = "delete_holiday"
    id: str


HolidayAction = Union[GetHolidaysRequest, AddHolidayRequest, DeleteHolidayRequest]


def _is_filled(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _parse_get(body: Dict[str, Any]) -> GetHolidaysRequest:
    return GetHolidaysRequest()


def _parse_add(body: Dict[str, Any]) -> AddHolidayRequest:
    date, reason = body.get("date"), body.get("reason")
    if not _is_filled(date) or not _is_filled(reason):
        raise InvalidRequestError("Date and reason are required")
    return AddHolidayRequest(date=date, reason=reason)


def _parse_delete(body: Dict[str, Any]) -> DeleteHolidayRequest:
    holiday_id = body.get("id")
    if not holiday_id:
        raise InvalidRequestError("Holiday ID is required")
    if not isinstance(holiday_id, str) or not ObjectId.is_valid(holiday_id):
        raise InvalidRequestError("Invalid holiday ID format")
    return DeleteHolidayRequest(id=holiday_id)


_PARSERS = {
    "get_holidays": _parse_get,
    "add_holiday": _parse_add,
    "delete_holiday": _parse_delete,
}


def parse_action(body: Any) -> HolidayAction:
    """
    Validate a decoded JSON body into one of the three request variants.

    Raises:
        InvalidRequestError: with the message to send back to the client.
    """
    action = body.get("action") if isinstance(body, dict) else None
    if not _is_filled(action):
        raise InvalidRequestError("Action parameter is required")

    parser = _PARSERS.get(action)
    if parser is None:
        raise InvalidRequestError(f"Invalid action: {action}")
    return parser(body)
