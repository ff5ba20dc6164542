# app/routes/bookings.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.crud.booking_crud import BookingStore, get_booking_store
from app.middleware.auth import get_current_user, verify_owner
from app.schemas.bookings import BookingCreate, BookingStatusUpdate
from app.schemas.results import DeleteResult, InsertResult, UpdateResult
from thrive.serialize import to_object_id

logger = logging.getLogger(__name__)

booking_router = APIRouter(tags=["Bookings"])


@booking_router.post("/service-booking", response_model=InsertResult)
async def create_booking(
    data: BookingCreate,
    current_user: dict = Depends(get_current_user),
    store: BookingStore = Depends(get_booking_store),
):
    booking = data.model_dump(exclude_none=True)
    # Booker defaults to the authenticated caller
    booking.setdefault("userEmail", current_user.get("email"))

    result = await store.create(booking)
    logger.info("Booking %s created by %s", result.inserted_id, booking.get("userEmail"))
    return InsertResult.from_mongo(result)


# Get current user's bookings
@booking_router.get("/get-my-booking")
async def get_my_bookings(
    userEmail: Optional[str] = Query(None),
    current_user: dict = Depends(get_current_user),
    store: BookingStore = Depends(get_booking_store),
) -> List[dict]:
    verify_owner(current_user, userEmail)
    return await store.list_by_user(userEmail)


# Provider: bookings made against my services
@booking_router.get("/get-pending-booking")
async def get_pending_bookings(
    providerEmail: Optional[str] = Query(None),
    current_user: dict = Depends(get_current_user),
    store: BookingStore = Depends(get_booking_store),
) -> List[dict]:
    verify_owner(current_user, providerEmail)
    return await store.list_by_provider(providerEmail)


@booking_router.delete("/delete-my-booking/{booking_id}", response_model=DeleteResult)
async def delete_booking(
    booking_id: str,
    current_user: dict = Depends(get_current_user),
    store: BookingStore = Depends(get_booking_store),
):
    result = await store.delete_by_id(to_object_id(booking_id))
    return DeleteResult.from_mongo(result)


@booking_router.patch("/update-service-status/{booking_id}", response_model=UpdateResult)
async def update_status(
    booking_id: str,
    data: BookingStatusUpdate,
    current_user: dict = Depends(get_current_user),
    store: BookingStore = Depends(get_booking_store),
):
    result = await store.update_status(to_object_id(booking_id), data.updateStatus)
    logger.info("Booking %s status -> %s", booking_id, data.updateStatus)
    return UpdateResult.from_mongo(result)
