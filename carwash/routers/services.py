"""
Service record routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from carwash.auth import require_user
from carwash.database import get_db
from carwash.repositories import ServiceRepository
from carwash.schemas.common import Envelope, MessageResponse
from carwash.schemas.service import Service as ServiceSchema, ServiceCreate, ServiceDetail, ServiceUpdate
from carwash.schemas.user import UserSummary

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=Envelope[List[ServiceDetail]])
async def get_services(
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Get all services, newest first, with car, package and payment details.
    """
    services = await ServiceRepository(db).list()
    return {"success": True, "data": services}


@router.get("/{record_number}", response_model=Envelope[ServiceDetail])
async def get_service(
    record_number: int,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Get a specific service with its details.
    """
    service = await ServiceRepository(db).get(record_number)
    return {"success": True, "data": service}


@router.post("", response_model=Envelope[ServiceSchema], status_code=status.HTTP_201_CREATED)
async def create_service(
    service: ServiceCreate,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Record a package applied to a car. Both must exist.
    """
    db_service = await ServiceRepository(db).create(service)
    return {
        "success": True,
        "message": "Service created successfully",
        "data": ServiceSchema.model_validate(db_service),
    }


@router.put("/{record_number}", response_model=Envelope[ServiceSchema])
async def update_service(
    record_number: int,
    service_update: ServiceUpdate,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Replace a service record.
    """
    db_service = await ServiceRepository(db).update(record_number, service_update)
    return {
        "success": True,
        "message": "Service updated successfully",
        "data": ServiceSchema.model_validate(db_service),
    }


@router.delete("/{record_number}", response_model=MessageResponse)
async def delete_service(
    record_number: int,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete an unpaid service.
    """
    await ServiceRepository(db).delete(record_number)
    return {"success": True, "message": "Service deleted successfully"}
