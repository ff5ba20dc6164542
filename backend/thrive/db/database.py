# thrive/db/database.py
import asyncio
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.server_api import ServerApi

from thrive.core.config import settings

logger = logging.getLogger(__name__)

SERVICE_COLLECTION = "services"
BOOKING_COLLECTION = "bookings"


def create_client() -> AsyncIOMotorClient:
    return AsyncIOMotorClient(
        settings.mongo_url,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


async def ping(client: AsyncIOMotorClient, timeout: float = 5) -> None:
    """Ping the deployment; failures are logged, never raised."""
    try:
        await asyncio.wait_for(client.admin.command("ping"), timeout=timeout)
        logger.info("Pinged your deployment. MongoDB connection is up.")
    except Exception as e:
        logger.error("MongoDB ping failed: %s", e)


def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.db
