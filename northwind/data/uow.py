"""Unit of Work pattern for atomic transactions."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from northwind.domain.exceptions import NorthwindError

logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Open one SQLAlchemy session per unit of work
    2. Commit at most once
    3. Roll back on any exception, cancellation, or exit without commit
    4. Always close the session

    Usage:
        async with UnitOfWork(session_factory) as uow:
            uow.session.add(model)
            await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._committed = False

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        self._committed = False
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Roll back anything not committed, then close the session."""
        try:
            if exc_type is not None:
                # Domain outcomes are reported by the caller
                if issubclass(exc_type, NorthwindError):
                    logger.debug(f"Transaction aborted: {exc_type.__name__}: {exc_val}")
                else:
                    logger.error(f"Transaction failed: {exc_type.__name__}: {exc_val}")
                await self._session.rollback()
            elif not self._committed:
                await self._session.rollback()
        finally:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> AsyncSession:
        """Get the session bound to this unit of work.

        Returns:
            AsyncSession instance
        """
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def committed(self) -> bool:
        return self._committed

    async def commit(self) -> None:
        """Commit all pending changes. Allowed once per unit of work."""
        if self._committed:
            raise RuntimeError("UnitOfWork already committed.")
        await self.session.commit()
        self._committed = True
        logger.info("✅ Transaction committed")

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()
        logger.warning("Transaction rolled back")


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
