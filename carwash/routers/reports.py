"""
Bill and report routes.
"""
from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from carwash.auth import require_user
from carwash.database import get_db
from carwash.repositories import ReportRepository
from carwash.schemas.common import Envelope
from carwash.schemas.report import Bill, DailyReport, Dashboard
from carwash.schemas.user import UserSummary

router = APIRouter(tags=["reports"])


@router.get("/bill/{payment_number}", response_model=Envelope[Bill])
async def get_bill(
    payment_number: int,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Build the receipt for a payment.
    """
    bill = await ReportRepository(db).bill(payment_number, issued_on=date.today())
    return {"success": True, "data": bill}


@router.get("/reports/dashboard", response_model=Envelope[Dashboard])
async def get_dashboard(
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Dashboard counters as of today.
    """
    dashboard = await ReportRepository(db).dashboard(today=date.today())
    return {"success": True, "data": dashboard}


@router.get("/reports/daily/{report_date}", response_model=Envelope[DailyReport])
async def get_daily_report(
    report_date: date,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    All services on one date with their payments and totals.
    """
    report = await ReportRepository(db).daily(report_date)
    return {"success": True, "data": report}
