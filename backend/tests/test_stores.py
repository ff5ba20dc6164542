"""
Store classes against an in-memory Mongo, without HTTP.
"""

import pytest
from bson import ObjectId

from app.crud.booking_crud import DEFAULT_STATUS, BookingStore
from app.crud.service_crud import ServiceStore

pytestmark = pytest.mark.anyio


@pytest.fixture(name="services")
def services_fixture(database):
    return ServiceStore(database["services"])


@pytest.fixture(name="bookings")
def bookings_fixture(database):
    return BookingStore(database["bookings"])


async def test_list_all_is_reverse_insertion_order(services):
    ids = [(await services.create({"providerEmail": "p@x.com", "n": n})).inserted_id for n in range(5)]
    listed = await services.list_all()
    assert [s["_id"] for s in listed] == [str(i) for i in reversed(ids)]


async def test_list_by_provider_filters(services):
    await services.create({"providerEmail": "p@x.com"})
    await services.create({"providerEmail": "q@x.com"})
    listed = await services.list_by_provider("q@x.com")
    assert [s["providerEmail"] for s in listed] == ["q@x.com"]


async def test_get_by_id_missing_is_none(services):
    assert await services.get_by_id(ObjectId()) is None


async def test_update_upserts_missing(services):
    target = ObjectId()
    result = await services.update(target, {"serviceName": "New"})
    assert result.upserted_id == target
    assert (await services.get_by_id(target))["serviceName"] == "New"


async def test_create_booking_does_not_mutate_input(bookings):
    doc = {"userEmail": "u@x.com", "providerEmail": "p@x.com"}
    await bookings.create(doc)
    assert "status" not in doc
    assert (await bookings.list_by_user("u@x.com"))[0]["status"] == DEFAULT_STATUS


async def test_update_status_last_write_wins(bookings):
    booking_id = (await bookings.create({"userEmail": "u@x.com", "providerEmail": "p@x.com"})).inserted_id
    await bookings.update_status(booking_id, "accepted")
    await bookings.update_status(booking_id, "rejected")
    assert (await bookings.list_by_provider("p@x.com"))[0]["status"] == "rejected"


async def test_delete_missing_booking(bookings):
    result = await bookings.delete_by_id(ObjectId())
    assert result.deleted_count == 0
