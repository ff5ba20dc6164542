# app/crud/booking_crud.py
from bson import ObjectId
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase

from thrive.db.database import BOOKING_COLLECTION, get_database
from thrive.serialize import serialize_list

LIST_LIMIT = 1000
DEFAULT_STATUS = "pending"


class BookingStore:
    """CRUD over the bookings collection.

    ``status`` is an open string: ``update_status`` accepts any value from
    any prior value and concurrent updates are last-write-wins.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, doc: dict):
        booking = dict(doc)
        if not booking.get("status"):
            booking["status"] = DEFAULT_STATUS
        return await self.collection.insert_one(booking)

    async def list_by_user(self, user_email: str):
        bookings = await self.collection.find({"userEmail": user_email}).to_list(LIST_LIMIT)
        return serialize_list(bookings)

    async def list_by_provider(self, provider_email: str):
        bookings = await self.collection.find({"providerEmail": provider_email}).to_list(LIST_LIMIT)
        return serialize_list(bookings)

    async def delete_by_id(self, booking_id: ObjectId):
        return await self.collection.delete_one({"_id": booking_id})

    async def update_status(self, booking_id: ObjectId, status: str):
        return await self.collection.update_one({"_id": booking_id}, {"$set": {"status": status}})


def get_booking_store(db: AsyncIOMotorDatabase = Depends(get_database)) -> BookingStore:
    return BookingStore(db[BOOKING_COLLECTION])
