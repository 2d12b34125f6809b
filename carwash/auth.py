"""
Password hashing and session-based authentication dependencies.
"""
import logging
from typing import Optional

import bcrypt
from fastapi import Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from carwash.config import Settings, get_settings
from carwash.exceptions import Unauthorized
from carwash.schemas.user import UserSummary
from carwash.sessions import SessionCookieSigner, SessionStore, get_cookie_signer, get_session_store

logger = logging.getLogger(__name__)


def _encode(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes
    return password.encode("utf-8")[:72]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password with a per-password salt."""
    salt = bcrypt.gensalt(rounds=rounds or get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


async def hash_password_async(password: str) -> str:
    return await run_in_threadpool(hash_password, password)


async def verify_password_async(password: str, password_hash: str) -> bool:
    return await run_in_threadpool(verify_password, password, password_hash)


def _session_id(request: Request, settings: Settings, signer: SessionCookieSigner) -> Optional[str]:
    cookie = request.cookies.get(settings.session_cookie_name)
    if not cookie:
        return None
    return signer.unsign(cookie)


def get_current_session(
    request: Request,
    settings: Settings = Depends(get_settings),
    store: SessionStore = Depends(get_session_store),
    signer: SessionCookieSigner = Depends(get_cookie_signer),
) -> Optional[UserSummary]:
    """Return the signed-in identity, or None for anonymous requests."""
    session_id = _session_id(request, settings, signer)
    if session_id is None:
        return None
    payload = store.get(session_id)
    if not payload:
        return None
    return UserSummary(id=payload["user_id"], username=payload["username"])


def require_user(user: Optional[UserSummary] = Depends(get_current_session)) -> UserSummary:
    """Reject anonymous requests before any resource logic runs."""
    if user is None:
        raise Unauthorized()
    return user


def start_session(
    request: Request,
    response: Response,
    user: UserSummary,
    settings: Settings,
    store: SessionStore,
    signer: SessionCookieSigner,
) -> str:
    """
    Store the identity under a fresh session id and set the cookie.
    Any session the caller already held is destroyed first.
    """
    previous_id = _session_id(request, settings, signer)
    if previous_id is not None:
        store.destroy(previous_id)
    session_id = signer.new_session_id()
    store.set(
        session_id,
        {"user_id": user.id, "username": user.username},
        ttl=settings.session_max_age_seconds,
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=signer.sign(session_id),
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=settings.session_cookie_samesite,
    )
    return session_id


def end_session(
    request: Request,
    response: Response,
    settings: Settings,
    store: SessionStore,
    signer: SessionCookieSigner,
) -> None:
    """Destroy the current session, if any, and clear the cookie."""
    session_id = _session_id(request, settings, signer)
    if session_id is not None:
        store.destroy(session_id)
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=settings.session_cookie_samesite,
    )
