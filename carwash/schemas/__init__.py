"""
Pydantic schemas for request/response validation.
"""
from carwash.schemas.common import CamelModel, Envelope, MessageResponse
from carwash.schemas.car import CarCreate, CarUpdate, Car
from carwash.schemas.package import PackageBase, PackageCreate, PackageUpdate, Package
from carwash.schemas.service import ServiceBase, ServiceCreate, ServiceUpdate, Service, ServiceDetail
from carwash.schemas.payment import PaymentCreate, PaymentUpdate, Payment, PaymentDetail
from carwash.schemas.user import (
    UserCreate, LoginRequest, UserSummary, RegisteredUser, LoginResult, AuthStatus,
)
from carwash.schemas.report import Bill, Dashboard, DailyReport, DailyReportRow, RecentService

__all__ = [
    "CamelModel", "Envelope", "MessageResponse",
    "CarCreate", "CarUpdate", "Car",
    "PackageBase", "PackageCreate", "PackageUpdate", "Package",
    "ServiceBase", "ServiceCreate", "ServiceUpdate", "Service", "ServiceDetail",
    "PaymentCreate", "PaymentUpdate", "Payment", "PaymentDetail",
    "UserCreate", "LoginRequest", "UserSummary", "RegisteredUser", "LoginResult", "AuthStatus",
    "Bill", "Dashboard", "DailyReport", "DailyReportRow", "RecentService",
]
