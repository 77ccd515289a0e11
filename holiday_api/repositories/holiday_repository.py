import logging
from typing import List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from holiday_api.models.holiday import Holiday, HolidayCreate

logger = logging.getLogger(__name__)


class HolidayRepository:
    """Repository for Holiday database operations"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def list_all(self) -> List[Holiday]:
        """Return every stored holiday, in whatever order the store yields them"""
        holidays = []
        async for doc in self.collection.find({}):
            holidays.append(Holiday.from_document(doc))
        return holidays

    async def create(self, date: str, reason: str) -> str:
        """Insert a holiday and return its new id"""
        doc = HolidayCreate(date=date, reason=reason).model_dump(by_alias=True)
        res = await self.collection.insert_one(doc)
        return str(res.inserted_id)

    async def delete(self, holiday_id: str) -> bool:
        """Delete a holiday by id. Returns False when nothing matched."""
        res = await self.collection.delete_one({"_id": ObjectId(holiday_id)})
        return res.deleted_count > 0
