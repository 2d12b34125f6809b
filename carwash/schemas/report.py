"""
Pydantic schemas for bills, the dashboard and daily reports.
"""
import datetime as dt
from typing import Optional

from pydantic import Field

from carwash.schemas.common import CamelModel


class BillCar(CamelModel):
    plate_number: str
    type: str
    size: str
    driver: str
    phone: str


class BillService(CamelModel):
    record_number: int
    service_date: dt.date
    package_number: int
    package_name: str
    package_description: str
    package_price: float


class BillPayment(CamelModel):
    payment_number: int
    amount_paid: float
    payment_date: dt.date
    payment_method: str
    payment_status: str


class Bill(CamelModel):
    """Receipt for one payment."""
    bill_number: str
    date: dt.date
    car: BillCar
    service: BillService
    payment: BillPayment


class RecentService(CamelModel):
    record_number: int
    plate_number: str
    service_date: dt.date
    driver_name: Optional[str] = None
    package_name: Optional[str] = None
    package_price: Optional[float] = None


class Dashboard(CamelModel):
    """Counters as of request time."""
    total_users: int
    total_cars: int
    total_packages: int
    total_services: int
    total_payments: int
    total_revenue: float
    today_services: int
    monthly_revenue: float
    recent_services: list[RecentService] = Field(default_factory=list)


class DailyReportRow(CamelModel):
    record_number: int
    service_date: dt.date
    plate_number: str
    driver_name: Optional[str] = None
    phone_number: Optional[str] = None
    package_name: Optional[str] = None
    package_description: Optional[str] = None
    payment_number: Optional[int] = None
    amount_paid: Optional[float] = None
    payment_date: Optional[dt.date] = None


class DailyReport(CamelModel):
    report_date: dt.date
    total_services: int
    total_revenue: float
    services: list[DailyReportRow] = Field(default_factory=list)
