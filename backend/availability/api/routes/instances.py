"""Instance Routes — create, fetch, and delete availability records.

Invariants:
    - POST /instance → 200 {instanceId}; 400 on decode/validation/duplicate; 500 on store failure
    - GET /instance/{id} → 200 list (empty when nothing matches)
    - DELETE /instance/{id}/{username} → 200 {message}; 404 when nothing was deleted
    - Errors are raised as AvailabilityError and rendered by the global handlers
    - The create body is decoded from raw bytes: Content-Type is not required

Design Decisions:
    - No prefix: paths are part of the published contract
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from availability.api.dependencies import get_instance_service
from availability.schemas.instance import (
    DeleteConfirmation, InstanceCreate, InstanceCreated, InstanceView,
)
from availability.services.instance_service import InstanceService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/instance", tags=["instances"])


async def read_create_body(request: Request) -> InstanceCreate:
    """Decode the raw body as JSON whatever the Content-Type header says."""
    raw = await request.body()
    try:
        return InstanceCreate.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError([
            {**err, "loc": ("body", *err["loc"])}
            for err in e.errors(include_url=False)
        ]) from e


@router.post(
    "", response_model=InstanceCreated, status_code=status.HTTP_200_OK,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": InstanceCreate.model_json_schema()}},
        },
    },
)
async def create_instance(
    body: InstanceCreate = Depends(read_create_body),
    service: InstanceService = Depends(get_instance_service),
):
    """Register a username's weeks under an instance (new id when omitted)."""
    instance_id = await service.create(body)
    return InstanceCreated(instance_id=instance_id)


@router.get("/{instance_id}", response_model=list[InstanceView])
async def get_instance(
    instance_id: str,
    service: InstanceService = Depends(get_instance_service),
):
    """All records stored under instance_id, weeks as binary strings."""
    return await service.fetch(instance_id)


@router.delete("/{instance_id}/{username}", response_model=DeleteConfirmation)
async def delete_instance(
    instance_id: str,
    username: str,
    service: InstanceService = Depends(get_instance_service),
):
    """Delete one (instance_id, username) record."""
    await service.delete(instance_id, username)
    return DeleteConfirmation()
