"""
Read-only aggregation queries: bills, the dashboard and daily reports.
"""
import datetime as dt

from sqlalchemy import func, select

from carwash.exceptions import NotFound
from carwash.models import Car, Package, Payment, ServicePackage, User
from carwash.repositories.base import Repository
from carwash.schemas.report import (
    Bill,
    BillCar,
    BillPayment,
    BillService,
    DailyReport,
    DailyReportRow,
    Dashboard,
    RecentService,
)

RECENT_SERVICES_LIMIT = 10


def month_bounds(day: dt.date) -> tuple[dt.date, dt.date]:
    """First day of the month containing ``day`` and first day of the next one."""
    start = day.replace(day=1)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


class ReportRepository(Repository):

    async def bill(self, payment_number: int, issued_on: dt.date) -> Bill:
        """Receipt for a payment; every link in the chain must exist."""
        query = (
            select(
                Payment.payment_number,
                Payment.amount_paid,
                Payment.payment_date,
                Payment.payment_method,
                Payment.payment_status,
                ServicePackage.record_number,
                ServicePackage.service_date,
                Car.plate_number,
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
            .join(ServicePackage, Payment.record_number == ServicePackage.record_number)
            .join(Car, ServicePackage.plate_number == Car.plate_number)
            .join(Package, ServicePackage.package_number == Package.package_number)
            .where(Payment.payment_number == payment_number)
        )
        row = (await self.session.execute(query)).mappings().first()
        if row is None:
            raise NotFound("Payment not found")

        return Bill(
            bill_number=f"BILL-{row['payment_number']}",
            date=issued_on,
            car=BillCar(
                plate_number=row["plate_number"],
                type=row["car_type"],
                size=row["car_size"],
                driver=row["driver_name"],
                phone=row["phone_number"],
            ),
            service=BillService(
                record_number=row["record_number"],
                service_date=row["service_date"],
                package_number=row["package_number"],
                package_name=row["package_name"],
                package_description=row["package_description"],
                package_price=row["package_price"],
            ),
            payment=BillPayment(
                payment_number=row["payment_number"],
                amount_paid=row["amount_paid"],
                payment_date=row["payment_date"],
                payment_method=row["payment_method"],
                payment_status=row["payment_status"],
            ),
        )

    async def _sum_paid(self, *criteria) -> float:
        query = select(func.coalesce(func.sum(Payment.amount_paid), 0))
        if criteria:
            query = query.where(*criteria)
        result = await self.session.execute(query)
        return float(result.scalar_one())

    async def recent_services(self, limit: int = RECENT_SERVICES_LIMIT) -> list[RecentService]:
        query = (
            select(
                ServicePackage.record_number,
                ServicePackage.plate_number,
                ServicePackage.service_date,
                Car.driver_name,
                Package.package_name,
                Package.package_price,
            )
            .select_from(ServicePackage)
            .outerjoin(Car, ServicePackage.plate_number == Car.plate_number)
            .outerjoin(Package, ServicePackage.package_number == Package.package_number)
            .order_by(ServicePackage.service_date.desc(), ServicePackage.record_number.desc())
            .limit(limit)
        )
        result = await self.session.execute(query)
        return [RecentService.model_validate(dict(row)) for row in result.mappings().all()]

    async def dashboard(self, today: dt.date) -> Dashboard:
        """
        Counters as of ``today``.

        The sub-queries run in one transaction, so a failure in any of them
        fails the whole dashboard.
        """
        month_start, next_month = month_bounds(today)
        return Dashboard(
            total_users=await self._count(User),
            total_cars=await self._count(Car),
            total_packages=await self._count(Package),
            total_services=await self._count(ServicePackage),
            total_payments=await self._count(Payment),
            total_revenue=await self._sum_paid(),
            today_services=await self._count(ServicePackage, ServicePackage.service_date == today),
            monthly_revenue=await self._sum_paid(
                Payment.payment_date >= month_start, Payment.payment_date < next_month
            ),
            recent_services=await self.recent_services(),
        )

    async def daily(self, report_date: dt.date) -> DailyReport:
        """Every service on ``report_date``, with totals. Unpaid services add 0."""
        query = (
            select(
                ServicePackage.record_number,
                ServicePackage.service_date,
                ServicePackage.plate_number,
                Car.driver_name,
                Car.phone_number,
                Package.package_name,
                Package.package_description,
                Payment.payment_number,
                Payment.amount_paid,
                Payment.payment_date,
            )
            .select_from(ServicePackage)
            .outerjoin(Package, ServicePackage.package_number == Package.package_number)
            .outerjoin(Payment, ServicePackage.record_number == Payment.record_number)
            .outerjoin(Car, ServicePackage.plate_number == Car.plate_number)
            .where(ServicePackage.service_date == report_date)
            .order_by(ServicePackage.record_number)
        )
        result = await self.session.execute(query)
        rows = [DailyReportRow.model_validate(dict(row)) for row in result.mappings().all()]
        return DailyReport(
            report_date=report_date,
            total_services=len(rows),
            total_revenue=sum(row.amount_paid or 0 for row in rows),
            services=rows,
        )
