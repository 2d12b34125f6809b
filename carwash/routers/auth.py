"""
Authentication routes.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from carwash.auth import (
    end_session,
    get_current_session,
    hash_password_async,
    start_session,
    verify_password_async,
)
from carwash.config import Settings, get_settings
from carwash.database import get_db
from carwash.exceptions import InvalidCredentials
from carwash.repositories import UserRepository
from carwash.schemas.common import Envelope, MessageResponse
from carwash.schemas.user import (
    AuthStatus,
    LoginRequest,
    LoginResult,
    RegisteredUser,
    UserCreate,
    UserSummary,
)
from carwash.sessions import SessionCookieSigner, SessionStore, get_cookie_signer, get_session_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=Envelope[RegisteredUser], status_code=status.HTTP_201_CREATED)
async def register(user: UserCreate, db: AsyncSession = Depends(get_db)):
    """
    Register a new user.
    """
    password_hash = await hash_password_async(user.password)
    db_user = await UserRepository(db).create(user.username, password_hash)
    logger.info("Registered user %s (id=%s)", db_user.username, db_user.id)

    return {
        "success": True,
        "message": "User registered successfully",
        "data": RegisteredUser(user_id=db_user.id),
    }


@router.post("/login", response_model=Envelope[LoginResult])
async def login(
    credentials: LoginRequest,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    store: SessionStore = Depends(get_session_store),
    signer: SessionCookieSigner = Depends(get_cookie_signer),
):
    """
    Verify credentials and open a session.
    Unknown usernames and wrong passwords get the same answer.
    """
    db_user = await UserRepository(db).get_by_username(credentials.username)
    if db_user is None or not await verify_password_async(credentials.password, db_user.password_hash):
        logger.info("Failed login for %s", credentials.username)
        raise InvalidCredentials()

    user = UserSummary(id=db_user.id, username=db_user.username)
    start_session(request, response, user, settings, store, signer)
    logger.info("User %s logged in", user.username)

    return {"success": True, "message": "Login successful", "data": LoginResult(user=user)}


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    settings: Settings = Depends(get_settings),
    store: SessionStore = Depends(get_session_store),
    signer: SessionCookieSigner = Depends(get_cookie_signer),
):
    """
    Destroy the current session.
    """
    end_session(request, response, settings, store, signer)
    return {"success": True, "message": "Logout successful"}


@router.get("/status", response_model=Envelope[AuthStatus])
async def auth_status(user: Optional[UserSummary] = Depends(get_current_session)):
    """
    Report the signed-in identity without side effects.
    """
    return {
        "success": True,
        "data": AuthStatus(authenticated=user is not None, user=user),
    }
