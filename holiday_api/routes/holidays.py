import json
import logging
import os

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from holiday_api.db import DatabaseConnectionError
from holiday_api.models.holiday import (
    AddHolidayRequest,
    DeleteHolidayRequest,
    GetHolidaysRequest,
    HolidayAction,
    InvalidRequestError,
    parse_action,
)
from holiday_api.repositories.holiday_repository import HolidayRepository

logger = logging.getLogger(__name__)

API_PATH = os.getenv("API_PATH", "/api")

# Every method is routed here so the handler can answer 405 itself
ACCEPTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

router = APIRouter(tags=["Holidays"])


def error_response(status_code: int, message: str, details: str = None) -> JSONResponse:
    content = {"error": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def _decode_body(raw: bytes):
    """An empty body counts as ``{}``."""
    if not raw.strip():
        return {}
    return json.loads(raw)


@router.api_route(API_PATH, methods=ACCEPTED_METHODS)
async def holidays_endpoint(request: Request):
    if request.method == "OPTIONS":
        return Response(status_code=200, media_type="application/json")

    if request.method != "POST":
        return error_response(405, "Method not allowed")

    try:
        try:
            body = _decode_body(await request.body())
        except ValueError:
            return error_response(400, "Invalid JSON in request body")

        try:
            action = parse_action(body)
        except InvalidRequestError as e:
            logger.warning("Rejected request: %s", e.message)
            return error_response(400, e.message)

        try:
            collection = await request.app.state.mongo.get_collection()
        except DatabaseConnectionError as e:
            return error_response(500, "Database connection failed", str(e))

        return await dispatch(action, HolidayRepository(collection))
    except Exception as e:
        logger.exception("Unhandled error while processing holiday request")
        return error_response(500, "Internal server error", str(e))


async def dispatch(action: HolidayAction, repository: HolidayRepository) -> JSONResponse:
    if isinstance(action, GetHolidaysRequest):
        return await get_holidays(repository)
    if isinstance(action, AddHolidayRequest):
        return await add_holiday(action, repository)
    if isinstance(action, DeleteHolidayRequest):
        return await delete_holiday(action, repository)
    raise TypeError(f"Unsupported holiday action: {type(action).__name__}")


async def get_holidays(repository: HolidayRepository) -> JSONResponse:
    try:
        holidays = await repository.list_all()
    except Exception as e:
        logger.exception("Error fetching holidays")
        return error_response(500, "Failed to fetch holidays", str(e))

    logger.info("Fetched %s holidays", len(holidays))
    return JSONResponse(status_code=200, content=[h.model_dump() for h in holidays])


async def add_holiday(request: AddHolidayRequest, repository: HolidayRepository) -> JSONResponse:
    try:
        holiday_id = await repository.create(request.date, request.reason)
    except Exception as e:
        logger.exception("Error adding holiday")
        return error_response(500, "Failed to add holiday", str(e))

    logger.info("Added holiday %s on %s", holiday_id, request.date)
    return JSONResponse(status_code=200, content={"success": True, "id": holiday_id})


async def delete_holiday(request: DeleteHolidayRequest, repository: HolidayRepository) -> JSONResponse:
    try:
        deleted = await repository.delete(request.id)
    except Exception as e:
        logger.exception("Error deleting holiday")
        return error_response(500, "Failed to delete holiday", str(e))

    if not deleted:
        return error_response(404, "Holiday not found")

    logger.info("Deleted holiday %s", request.id)
    return JSONResponse(status_code=200, content={"success": True})
