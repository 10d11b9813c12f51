"""Request Dependencies — per-request repository and service construction.

Invariants:
    - Handlers receive their repository by injection, never from a global
    - One DB session per request (get_db), closed when the request ends
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from availability.config import Settings, get_settings
from availability.core.repository_protocols import InstanceRepository
from availability.infrastructure.database import get_db
from availability.infrastructure.instance_repository import SqlInstanceRepository
from availability.models.instance_record import instance_table
from availability.services.instance_service import InstanceService


def get_instance_repository(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> InstanceRepository:
    return SqlInstanceRepository(
        db,
        instance_table(settings.db_collection),
        timeout_seconds=settings.store_timeout_seconds,
    )


def get_instance_service(
    repository: InstanceRepository = Depends(get_instance_repository),
) -> InstanceService:
    return InstanceService(repository)
