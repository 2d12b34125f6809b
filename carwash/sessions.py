"""
Server-side session storage and the signed session cookie.

The cookie holds only a random session id signed with the application secret;
the identity itself lives in a ``SessionStore``.
"""
import logging
import secrets
import time
from functools import lru_cache
from threading import Lock
from typing import Any, Optional, Protocol

from itsdangerous import BadSignature, SignatureExpired, TimestampSigner

from carwash.config import get_settings

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Storage interface for session payloads keyed by session id."""

    def get(self, session_id: str) -> Optional[dict[str, Any]]:
        ...

    def set(self, session_id: str, payload: dict[str, Any], ttl: int) -> None:
        ...

    def destroy(self, session_id: str) -> None:
        ...


class InMemorySessionStore:
    """
    Process-local session store with per-entry expiry.

    Expired entries are dropped when read, and swept from the whole store on
    ``set`` at most once per ``sweep_interval`` seconds.
    """

    def __init__(self, clock=time.monotonic, sweep_interval: float = 60.0):
        self._clock = clock
        self._sweep_interval = sweep_interval
        self._entries: dict[str, tuple[float, dict[str, Any]]] = {}
        self._lock = Lock()
        self._last_sweep = clock()

    def _sweep(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at <= now]
        for key in expired:
            del self._entries[key]
        self._last_sweep = now
        if expired:
            logger.debug("Evicted %d expired sessions", len(expired))

    def get(self, session_id: str) -> Optional[dict[str, Any]]:
        with self._lock:
            entry = self._entries.get(session_id)
            if entry is None:
                return None
            expires_at, payload = entry
            if expires_at <= self._clock():
                del self._entries[session_id]
                return None
            return dict(payload)

    def set(self, session_id: str, payload: dict[str, Any], ttl: int) -> None:
        with self._lock:
            now = self._clock()
            if now - self._last_sweep >= self._sweep_interval:
                self._sweep(now)
            self._entries[session_id] = (now + ttl, dict(payload))

    def destroy(self, session_id: str) -> None:
        with self._lock:
            self._entries.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class SessionCookieSigner:
    """Signs session ids for the cookie and verifies them on the way back."""

    def __init__(self, secret_key: str, max_age: int):
        self._signer = TimestampSigner(secret_key, salt="cwsms-session")
        self.max_age = max_age

    @staticmethod
    def new_session_id() -> str:
        return secrets.token_urlsafe(32)

    def sign(self, session_id: str) -> str:
        return self._signer.sign(session_id).decode("utf-8")

    def unsign(self, cookie_value: str) -> Optional[str]:
        """Return the session id, or None for a forged or expired cookie."""
        try:
            return self._signer.unsign(cookie_value, max_age=self.max_age).decode("utf-8")
        except SignatureExpired:
            logger.debug("Session cookie expired")
            return None
        except BadSignature:
            logger.info("Rejected session cookie with a bad signature")
            return None


@lru_cache()
def get_session_store() -> SessionStore:
    """Get the process-wide session store."""
    return InMemorySessionStore()


@lru_cache()
def get_cookie_signer() -> SessionCookieSigner:
    settings = get_settings()
    return SessionCookieSigner(settings.secret_key, settings.session_max_age_seconds)
