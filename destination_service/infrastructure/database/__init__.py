"""
Database Infrastructure
=======================

Manages the engine (and its connection pool), session lifecycle, and
table creation.

Uses SQLAlchemy 2.0 with asyncpg for async PostgreSQL operations.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from destination_service.config import settings
from destination_service.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    SQLAlchemy 2.0 style using DeclarativeBase.
    """
    pass


# Global engine and session maker
_engine: AsyncEngine | None = None
_session_maker: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """
    Get the database engine.

    Raises:
        RuntimeError: If engine has not been initialized
    """
    if _engine is None:
        raise RuntimeError("Database engine not initialized. Call init_database() first.")
    return _engine


def _register_error_listeners(engine: AsyncEngine) -> None:
    """Log pool and driver errors; the listeners never raise themselves."""

    @event.listens_for(engine.sync_engine, "handle_error")
    def _on_handle_error(context) -> None:
        logger.error(
            "Database error",
            extra={
                "error": str(context.original_exception),
                "is_disconnect": context.is_disconnect,
            }
        )

    @event.listens_for(engine.sync_engine.pool, "invalidate")
    def _on_invalidate(dbapi_connection, connection_record, exception) -> None:
        if exception is not None:
            logger.error(
                "Unexpected error on idle connection",
                extra={"error": str(exception)}
            )


def init_database(
    database_url: str | URL | None = None,
    **engine_kwargs: Any,
) -> AsyncEngine:
    """
    Initialize the database engine and session maker.

    Should be called during application startup.

    Args:
        database_url: Overrides the configured URL (tests use SQLite)
        **engine_kwargs: Replace the configured pool arguments

    Returns:
        AsyncEngine: The initialized engine
    """
    global _engine, _session_maker

    url = database_url or settings.sqlalchemy_database_url
    if isinstance(url, str):
        # asyncpg understands ssl=, not libpq's sslmode=
        url = url.replace("sslmode=", "ssl=")

    if not engine_kwargs:
        engine_kwargs = {
            "pool_size": settings.db_pool_size,
            "max_overflow": settings.db_max_overflow,
            "pool_pre_ping": True,
        }

    _engine = create_async_engine(url, echo=settings.debug, **engine_kwargs)
    _register_error_listeners(_engine)

    _session_maker = async_sessionmaker(
        bind=_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    return _engine


async def close_database() -> None:
    """
    Dispose of the engine and its pooled connections.

    Should be called during application shutdown.
    """
    global _engine, _session_maker

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_maker = None


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Async generator for database sessions.

    For use with FastAPI's Depends(); one session per request, returned to
    the pool when the request finishes.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    if _session_maker is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    async with _session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def get_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Async context manager for database sessions.

    For use in scripts and tests outside the request cycle.

    Usage:
        async with get_session_context() as session:
            repo = SQLAlchemyDestinationRepository(session)
            rows = await repo.list_all()
    """
    if _session_maker is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    async with _session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def create_tables() -> None:
    """
    Create the destinations table if it does not already exist.

    Safe to run on every startup: existing tables and rows are left alone.
    """
    # Registers the models on Base.metadata
    from destination_service.destinations.infrastructure import models  # noqa: F401

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)


async def check_connection() -> bool:
    """Return True when a trivial query succeeds against the pool."""
    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning(f"Database connectivity check failed: {e}")
        return False
    return True
