"""
Payment model for database.
"""
from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from carwash.database import Base


class Payment(Base):
    """Payment database model. A service is paid at most once."""

    __tablename__ = "payments"

    payment_number = Column(Integer, primary_key=True, autoincrement=True)
    amount_paid = Column(Float, nullable=False)
    payment_date = Column(Date, nullable=False, index=True)
    record_number = Column(
        Integer,
        ForeignKey("service_packages.record_number", ondelete="RESTRICT"),
        unique=True,
        nullable=False,
    )
    payment_method = Column(String(20), nullable=False, default="Cash")
    payment_status = Column(String(20), nullable=False, default="Completed")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    service = relationship("ServicePackage", back_populates="payment")
