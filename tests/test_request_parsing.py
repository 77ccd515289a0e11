import pytest
from bson import ObjectId

from holiday_api.models.holiday import (
    AddHolidayRequest,
    DeleteHolidayRequest,
    GetHolidaysRequest,
    Holiday,
    HolidayCreate,
    InvalidRequestError,
    parse_action,
)


def test_parse_each_action():
    holiday_id = str(ObjectId())

    assert isinstance(parse_action({"action": "get_holidays"}), GetHolidaysRequest)

    add = parse_action({"action": "add_holiday", "date": "2025-05-01", "reason": "Labour Day"})
    assert add == AddHolidayRequest(date="2025-05-01", reason="Labour Day")

    delete = parse_action({"action": "delete_holiday", "id": holiday_id})
    assert delete == DeleteHolidayRequest(id=holiday_id)


@pytest.mark.parametrize("body", [{}, {"action": ""}, {"action": None}, {"action": 3}, [], "get_holidays"])
def test_action_required(body):
    with pytest.raises(InvalidRequestError) as exc:
        parse_action(body)
    assert exc.value.message == "Action parameter is required"


def test_invalid_action_message():
    with pytest.raises(InvalidRequestError) as exc:
        parse_action({"action": "update_holiday"})
    assert exc.value.message == "Invalid action: update_holiday"


def test_add_holiday_rejects_non_string_fields():
    with pytest.raises(InvalidRequestError, match="Date and reason are required"):
        parse_action({"action": "add_holiday", "date": 20250101, "reason": "New Year"})


@pytest.mark.parametrize("bad_id", ["abc", "zzzzzzzzzzzzzzzzzzzzzzzz", 12345])
def test_delete_holiday_rejects_malformed_ids(bad_id):
    with pytest.raises(InvalidRequestError) as exc:
        parse_action({"action": "delete_holiday", "id": bad_id})
    assert exc.value.message == "Invalid holiday ID format"


def test_holiday_from_document_drops_created_at():
    oid = ObjectId()
    doc = HolidayCreate(date="2025-01-01", reason="New Year").model_dump(by_alias=True)
    doc["_id"] = oid

    holiday = Holiday.from_document(doc)
    assert holiday.model_dump() == {"id": str(oid), "date": "2025-01-01", "reason": "New Year"}
