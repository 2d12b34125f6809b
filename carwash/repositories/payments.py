"""
Payment repository.
"""
from sqlalchemy import select

from carwash.exceptions import Conflict, NotFound, ReferenceNotFound
from carwash.models import Car, Package, Payment, ServicePackage
from carwash.repositories.base import Repository
from carwash.schemas.payment import PaymentCreate, PaymentDetail, PaymentUpdate

ALREADY_PAID = "Payment already exists for this service"


def payment_detail_query():
    return (
        select(
            Payment.payment_number,
            Payment.amount_paid,
            Payment.payment_date,
            Payment.record_number,
            Payment.payment_method,
            Payment.payment_status,
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
        )
        .select_from(Payment)
        .outerjoin(ServicePackage, Payment.record_number == ServicePackage.record_number)
        .outerjoin(Car, ServicePackage.plate_number == Car.plate_number)
        .outerjoin(Package, ServicePackage.package_number == Package.package_number)
    )


class PaymentRepository(Repository):

    async def list(self) -> list[PaymentDetail]:
        query = payment_detail_query().order_by(
            Payment.payment_date.desc(), Payment.payment_number.desc()
        )
        result = await self.session.execute(query)
        return [PaymentDetail.model_validate(dict(row)) for row in result.mappings().all()]

    async def get(self, payment_number: int) -> PaymentDetail:
        query = payment_detail_query().where(Payment.payment_number == payment_number)
        row = (await self.session.execute(query)).mappings().first()
        if row is None:
            raise NotFound("Payment not found")
        return PaymentDetail.model_validate(dict(row))

    async def get_record(self, payment_number: int) -> Payment:
        payment = await self.session.get(Payment, payment_number)
        if payment is None:
            raise NotFound("Payment not found")
        return payment

    async def create(self, data: PaymentCreate) -> Payment:
        if await self.session.get(ServicePackage, data.record_number) is None:
            raise ReferenceNotFound("Service not found")
        if await self._count(Payment, Payment.record_number == data.record_number):
            raise Conflict(ALREADY_PAID)

        payment = Payment(**data.model_dump())
        self.session.add(payment)
        await self._commit(ALREADY_PAID)
        return payment

    async def update(self, payment_number: int, data: PaymentUpdate) -> Payment:
        payment = await self.get_record(payment_number)
        for field, value in data.model_dump().items():
            setattr(payment, field, value)
        await self._commit("Payment could not be updated")
        return payment

    async def delete(self, payment_number: int) -> None:
        payment = await self.get_record(payment_number)
        await self.session.delete(payment)
        await self._commit("Payment could not be deleted")
