"""
Payment routes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from carwash.auth import require_user
from carwash.database import get_db
from carwash.repositories import PaymentRepository
from carwash.schemas.common import Envelope, MessageResponse
from carwash.schemas.payment import Payment as PaymentSchema, PaymentCreate, PaymentDetail, PaymentUpdate
from carwash.schemas.user import UserSummary

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=Envelope[List[PaymentDetail]])
async def get_payments(
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Get all payments, newest first, with service, car and package details.
    """
    payments = await PaymentRepository(db).list()
    return {"success": True, "data": payments}


@router.get("/{payment_number}", response_model=Envelope[PaymentDetail])
async def get_payment(
    payment_number: int,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Get a specific payment with its details.
    """
    payment = await PaymentRepository(db).get(payment_number)
    return {"success": True, "data": payment}


@router.post("", response_model=Envelope[PaymentSchema], status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment: PaymentCreate,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Record the payment for a service. A service is paid once.
    """
    db_payment = await PaymentRepository(db).create(payment)
    return {
        "success": True,
        "message": "Payment created successfully",
        "data": PaymentSchema.model_validate(db_payment),
    }


@router.put("/{payment_number}", response_model=Envelope[PaymentSchema])
async def update_payment(
    payment_number: int,
    payment_update: PaymentUpdate,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Replace a payment's amount, date, method and status.
    """
    db_payment = await PaymentRepository(db).update(payment_number, payment_update)
    return {
        "success": True,
        "message": "Payment updated successfully",
        "data": PaymentSchema.model_validate(db_payment),
    }


@router.delete("/{payment_number}", response_model=MessageResponse)
async def delete_payment(
    payment_number: int,
    current_user: UserSummary = Depends(require_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Delete a payment.
    """
    await PaymentRepository(db).delete(payment_number)
    return {"success": True, "message": "Payment deleted successfully"}
