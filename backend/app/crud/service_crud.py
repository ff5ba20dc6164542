# app/crud/service_crud.py
from bson import ObjectId
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import DESCENDING

from thrive.db.database import SERVICE_COLLECTION, get_database
from thrive.serialize import serialize_doc, serialize_list

LIST_LIMIT = 1000


class ServiceStore:
    """CRUD over the services collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, doc: dict):
        return await self.collection.insert_one(doc)

    async def list_all(self):
        # _id ascends with insertion, so this is newest first
        services = await self.collection.find({}, sort=[("_id", DESCENDING)]).to_list(LIST_LIMIT)
        return serialize_list(services)

    async def list_by_provider(self, provider_email: str):
        services = await self.collection.find({"providerEmail": provider_email}).to_list(LIST_LIMIT)
        return serialize_list(services)

    async def get_by_id(self, service_id: ObjectId):
        return serialize_doc(await self.collection.find_one({"_id": service_id}))

    async def update(self, service_id: ObjectId, fields: dict):
        # Upsert: a missing service is created under the given id
        return await self.collection.update_one({"_id": service_id}, {"$set": fields}, upsert=True)

    async def delete_by_id(self, service_id: ObjectId):
        return await self.collection.delete_one({"_id": service_id})


def get_service_store(db: AsyncIOMotorDatabase = Depends(get_database)) -> ServiceStore:
    return ServiceStore(db[SERVICE_COLLECTION])
