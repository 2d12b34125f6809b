"""
Service record repository.

Listings are enriched with the car, package and payment of each record
using outer joins, so a missing related row shows up as nulls.
"""
from sqlalchemy import select

from carwash.exceptions import Conflict, NotFound, ReferenceNotFound
from carwash.models import Car, Package, Payment, ServicePackage
from carwash.repositories.base import Repository
from carwash.schemas.service import ServiceBase, ServiceDetail

HAS_PAYMENT = "Cannot delete service that has payment records"


def service_detail_query():
    return (
        select(
            ServicePackage.record_number,
            ServicePackage.service_date,
            ServicePackage.plate_number,
            Car.car_type,
            Car.car_size,
            Car.driver_name,
            Car.phone_number,
            Package.package_number,
            Package.package_name,
            Package.package_description,
            Package.package_price,
            Payment.payment_number,
            Payment.amount_paid,
            Payment.payment_date,
        )
        .select_from(ServicePackage)
        .outerjoin(Car, ServicePackage.plate_number == Car.plate_number)
        .outerjoin(Package, ServicePackage.package_number == Package.package_number)
        .outerjoin(Payment, ServicePackage.record_number == Payment.record_number)
    )


class ServiceRepository(Repository):

    async def list(self) -> list[ServiceDetail]:
        query = service_detail_query().order_by(
            ServicePackage.service_date.desc(), ServicePackage.record_number.desc()
        )
        result = await self.session.execute(query)
        return [ServiceDetail.model_validate(dict(row)) for row in result.mappings().all()]

    async def get(self, record_number: int) -> ServiceDetail:
        query = service_detail_query().where(ServicePackage.record_number == record_number)
        row = (await self.session.execute(query)).mappings().first()
        if row is None:
            raise NotFound("Service not found")
        return ServiceDetail.model_validate(dict(row))

    async def get_record(self, record_number: int) -> ServicePackage:
        record = await self.session.get(ServicePackage, record_number)
        if record is None:
            raise NotFound("Service not found")
        return record

    async def _check_references(self, data: ServiceBase) -> None:
        if await self.session.get(Car, data.plate_number) is None:
            raise ReferenceNotFound("Car not found")
        if await self.session.get(Package, data.package_number) is None:
            raise ReferenceNotFound("Package not found")

    async def create(self, data: ServiceBase) -> ServicePackage:
        await self._check_references(data)

        record = ServicePackage(**data.model_dump())
        self.session.add(record)
        await self._commit("Service could not be created")
        return record

    async def update(self, record_number: int, data: ServiceBase) -> ServicePackage:
        record = await self.get_record(record_number)
        await self._check_references(data)

        for field, value in data.model_dump().items():
            setattr(record, field, value)
        await self._commit("Service could not be updated")
        return record

    async def delete(self, record_number: int) -> None:
        record = await self.get_record(record_number)
        if await self._count(Payment, Payment.record_number == record_number):
            raise Conflict(HAS_PAYMENT)

        await self.session.delete(record)
        await self._commit(HAS_PAYMENT)
