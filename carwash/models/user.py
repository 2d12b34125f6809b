"""
User model for database.
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from carwash.database import Base


class User(Base):
    """User database model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
