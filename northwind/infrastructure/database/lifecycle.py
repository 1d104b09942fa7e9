"""Database Lifecycle Management - Async Version"""

from typing import Any, Dict, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from northwind.infrastructure.logging import get_logger
from northwind.settings import get_app_settings

logger = get_logger(__name__)

_async_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def _engine_options(url: str) -> Dict[str, Any]:
    """Pool options from settings; SQLite manages its own pool."""
    settings = get_app_settings().database
    options: Dict[str, Any] = {"echo": settings.echo_sql, "pool_pre_ping": True}

    if not make_url(url).drivername.startswith("sqlite"):
        options.update(
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_timeout=settings.pool_timeout,
            pool_recycle=settings.pool_recycle,
        )

    return options


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory used by every unit of work."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_database(url: Optional[str] = None, create_schema: bool = False) -> None:
    """Initialize async database engine and session factory.

    Args:
        url: Async database URL; defaults to NORTHWIND_DB_URL
        create_schema: Create missing tables from the ORM metadata
    """
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        return

    url = url or get_app_settings().database.url
    logger.info(f"Creating database engine: {make_url(url).render_as_string(hide_password=True)}")

    _async_engine = create_async_engine(url, **_engine_options(url))
    _async_session_factory = create_session_factory(_async_engine)

    if create_schema:
        from northwind.data.models import Base

        async with _async_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Database schema created")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get async session factory."""
    if _async_session_factory is None:
        raise RuntimeError(
            "Database not initialized. Call init_database() first."
        )
    return _async_session_factory


async def close_database() -> None:
    """Close async database engine."""
    global _async_engine, _async_session_factory

    if _async_engine is not None:
        logger.info("Closing database connections...")
        await _async_engine.dispose()

    _async_engine = None
    _async_session_factory = None
