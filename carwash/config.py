"""
Configuration settings for the Car Wash Management System.
Uses Pydantic for type-safe configuration management.
"""
import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "Car Wash Management System"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000

    # Database
    database_url: str = "postgresql+asyncpg://carwash_user:carwash_pass@db:5432/cwsms"
    database_timeout_seconds: int = 30

    # Security
    bcrypt_rounds: int = 10

    # Sessions
    secret_key: str = "cwsms-secret-key-change-this-in-production"
    session_cookie_name: str = "cwsms_session"
    session_max_age_seconds: int = 86400  # 24 hours
    session_cookie_secure: bool = False
    session_cookie_samesite: str = "lax"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:5174",
        "http://localhost:5175",
        "http://localhost:5176",
    ]

    # API
    api_prefix: str = "/api"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from settings."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, get_settings().log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
