# app/routes/services.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.crud.service_crud import ServiceStore, get_service_store
from app.middleware.auth import get_current_user, verify_owner
from app.schemas.results import DeleteResult, InsertResult, UpdateResult
from app.schemas.services import ServiceCreate, ServiceUpdate
from thrive.core.error_messages import ErrorResponses
from thrive.serialize import to_object_id

logger = logging.getLogger(__name__)

service_router = APIRouter(tags=["Services"])


@service_router.post("/add-service", response_model=InsertResult)
async def add_service(
    data: ServiceCreate,
    current_user: dict = Depends(get_current_user),
    store: ServiceStore = Depends(get_service_store),
):
    result = await store.create(data.model_dump())
    logger.info("Service %s added by %s", result.inserted_id, current_user.get("email"))
    return InsertResult.from_mongo(result)


# NOTE: update/delete only require a valid token; the caller is not checked
# against the service's providerEmail.
@service_router.put("/update-service/{service_id}", response_model=UpdateResult)
async def update_service(
    service_id: str,
    data: ServiceUpdate,
    current_user: dict = Depends(get_current_user),
    store: ServiceStore = Depends(get_service_store),
):
    fields = data.model_dump(exclude_unset=True)
    if not fields:
        raise ErrorResponses.EMPTY_UPDATE
    result = await store.update(to_object_id(service_id), fields)
    return UpdateResult.from_mongo(result)


@service_router.delete("/delete-service/{service_id}", response_model=DeleteResult)
async def delete_service(
    service_id: str,
    current_user: dict = Depends(get_current_user),
    store: ServiceStore = Depends(get_service_store),
):
    result = await store.delete_by_id(to_object_id(service_id))
    return DeleteResult.from_mongo(result)


@service_router.get("/get-services")
async def get_services(store: ServiceStore = Depends(get_service_store)) -> List[dict]:
    return await store.list_all()


@service_router.get("/get-provider-services")
async def get_provider_services(
    providerEmail: Optional[str] = Query(None),
    current_user: dict = Depends(get_current_user),
    store: ServiceStore = Depends(get_service_store),
) -> List[dict]:
    verify_owner(current_user, providerEmail)
    return await store.list_by_provider(providerEmail)


@service_router.get("/service-details/{service_id}")
async def get_service_details(
    service_id: str,
    store: ServiceStore = Depends(get_service_store),
) -> Optional[dict]:
    # Unknown ids answer 200 with null
    return await store.get_by_id(to_object_id(service_id))
