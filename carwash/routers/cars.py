"""
Car routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from carwash.auth import require_user
from carwash.database import get_db
from carwash.repositories import CarRepository
from carwash.schemas.car import Car as CarSchema, CarCreate, CarUpdate
from carwash.schemas.common import Envelope, MessageResponse
from carwash.schemas.user import UserSummary

router = APIRouter(prefix="/cars", tags=["cars"])


@router.get("", response_model=Envelope[List[CarSchema]])
async def get_cars(
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Get all cars ordered by plate number.
    """
    cars = await CarRepository(db).list()
    return {"success": True, "data": [CarSchema.model_validate(car) for car in cars]}


@router.get("/{plate_number}", response_model=Envelope[CarSchema])
async def get_car(
    plate_number: str,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Get a specific car by plate number.
    """
    car = await CarRepository(db).get(plate_number)
    return {"success": True, "data": CarSchema.model_validate(car)}


@router.post("", response_model=Envelope[CarSchema], status_code=status.HTTP_201_CREATED)
async def create_car(
    car: CarCreate,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new car.
    """
    db_car = await CarRepository(db).create(car)
    return {
        "success": True,
        "message": "Car created successfully",
        "data": CarSchema.model_validate(db_car),
    }


@router.put("/{plate_number}", response_model=Envelope[CarSchema])
async def update_car(
    plate_number: str,
    car_update: CarUpdate,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Replace a car's details.
    """
    db_car = await CarRepository(db).update(plate_number, car_update)
    return {
        "success": True,
        "message": "Car updated successfully",
        "data": CarSchema.model_validate(db_car),
    }


@router.delete("/{plate_number}", response_model=MessageResponse)
async def delete_car(
    plate_number: str,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a car that has no service records.
    """
    await CarRepository(db).delete(plate_number)
    return {"success": True, "message": "Car deleted successfully"}
