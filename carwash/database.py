"""
Database engine, session factory and schema management.
"""
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from carwash.config import get_settings

settings = get_settings()


def _engine_options(url: str, timeout: int) -> dict:
    if url.startswith("sqlite"):
        # aiosqlite connections are bound to the event loop that opened them
        return {"poolclass": NullPool, "connect_args": {"timeout": timeout}}
    if url.startswith("postgresql+asyncpg"):
        return {
            "pool_pre_ping": True,
            "connect_args": {"timeout": timeout, "command_timeout": timeout},
        }
    return {"pool_pre_ping": True}


engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options(settings.database_url, settings.database_timeout_seconds),
)

if engine.dialect.name == "sqlite":

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


async def get_db():
    """Yield a database session for one request."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db():
    """Create all tables that do not exist yet."""
    # Register the models on Base.metadata
    import carwash.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db():
    """Drop all tables."""
    import carwash.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
