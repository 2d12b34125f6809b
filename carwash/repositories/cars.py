"""
Car repository.
"""
from sqlalchemy import select

from carwash.exceptions import Conflict, NotFound
from carwash.models import Car, ServicePackage
from carwash.repositories.base import Repository
from carwash.schemas.car import CarCreate, CarUpdate

DUPLICATE_PLATE = "Car with this plate number already exists"


class CarRepository(Repository):

    async def list(self) -> list[Car]:
        result = await self.session.execute(select(Car).order_by(Car.plate_number))
        return list(result.scalars().all())

    async def get(self, plate_number: str) -> Car:
        car = await self.session.get(Car, plate_number)
        if car is None:
            raise NotFound("Car not found")
        return car

    async def exists(self, plate_number: str) -> bool:
        return await self.session.get(Car, plate_number) is not None

    async def create(self, data: CarCreate) -> Car:
        if await self.exists(data.plate_number):
            raise Conflict(DUPLICATE_PLATE)

        car = Car(**data.model_dump())
        self.session.add(car)
        await self._commit(DUPLICATE_PLATE)
        return car

    async def update(self, plate_number: str, data: CarUpdate) -> Car:
        car = await self.get(plate_number)
        for field, value in data.model_dump().items():
            setattr(car, field, value)
        await self._commit("Car could not be updated")
        return car

    async def delete(self, plate_number: str) -> None:
        car = await self.get(plate_number)
        if await self._count(ServicePackage, ServicePackage.plate_number == plate_number):
            raise Conflict("Cannot delete car that has service records")

        await self.session.delete(car)
        await self._commit("Cannot delete car that has service records")
