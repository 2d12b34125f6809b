"""
Pydantic schemas for User and Authentication.
"""
from typing import Optional

from pydantic import BaseModel, Field

from carwash.schemas.common import CamelModel
from carwash.validators import Password, Username


class UserCreate(BaseModel):
    """Schema for registering a user."""
    username: Username
    password: Password


class LoginRequest(BaseModel):
    """Schema for login request."""
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserSummary(BaseModel):
    """Identity held by a session."""
    id: int
    username: str


class RegisteredUser(CamelModel):
    user_id: int


class LoginResult(BaseModel):
    user: UserSummary


class AuthStatus(BaseModel):
    authenticated: bool
    user: Optional[UserSummary] = None
