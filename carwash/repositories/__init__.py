"""
Repositories wrapping reads and writes against each table.
"""
from carwash.repositories.cars import CarRepository
from carwash.repositories.packages import PackageRepository
from carwash.repositories.services import ServiceRepository
from carwash.repositories.payments import PaymentRepository
from carwash.repositories.users import UserRepository
from carwash.repositories.reports import ReportRepository

__all__ = [
    "CarRepository",
    "PackageRepository",
    "ServiceRepository",
    "PaymentRepository",
    "UserRepository",
    "ReportRepository",
]
