"""
Package routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from carwash.auth import require_user
from carwash.database import get_db
from carwash.repositories import PackageRepository
from carwash.schemas.common import Envelope, MessageResponse
from carwash.schemas.package import Package as PackageSchema, PackageCreate, PackageUpdate
from carwash.schemas.user import UserSummary

router = APIRouter(prefix="/packages", tags=["packages"])


@router.get("", response_model=Envelope[List[PackageSchema]])
async def get_packages(
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Get all packages ordered by package number.
    """
    packages = await PackageRepository(db).list()
    return {"success": True, "data": [PackageSchema.model_validate(p) for p in packages]}


@router.get("/{package_number}", response_model=Envelope[PackageSchema])
async def get_package(
    package_number: int,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Get a specific package by number.
    """
    package = await PackageRepository(db).get(package_number)
    return {"success": True, "data": PackageSchema.model_validate(package)}


@router.post("", response_model=Envelope[PackageSchema], status_code=status.HTTP_201_CREATED)
async def create_package(
    package: PackageCreate,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a new package.
    """
    db_package = await PackageRepository(db).create(package)
    return {
        "success": True,
        "message": "Package created successfully",
        "data": PackageSchema.model_validate(db_package),
    }


@router.put("/{package_number}", response_model=Envelope[PackageSchema])
async def update_package(
    package_number: int,
    package_update: PackageUpdate,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Replace a package.
    """
    db_package = await PackageRepository(db).update(package_number, package_update)
    return {
        "success": True,
        "message": "Package updated successfully",
        "data": PackageSchema.model_validate(db_package),
    }


@router.delete("/{package_number}", response_model=MessageResponse)
async def delete_package(
    package_number: int,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a package no service uses.
    """
    await PackageRepository(db).delete(package_number)
    return {"success": True, "message": "Package deleted successfully"}
