"""
Unit of Work: manages repositories and transaction boundaries.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.database.manager import DatabaseManager
from framework.logging.logger import get_logger

logger = get_logger("unit_of_work")


class UnitOfWork:
    """Manages related repositories with a shared session and transaction commit/rollback."""

    def __init__(self, session: Optional[AsyncSession] = None):
        """Initialize UnitOfWork; session must be provided (e.g. UnitOfWork.begin())."""
        if session is None:
            raise ValueError("Session must be provided. Use UnitOfWork.begin() or pass session explicitly.")

        self.session = session
        self._repositories = {}

    @classmethod
    @asynccontextmanager
    async def begin(cls, manager: Optional[DatabaseManager] = None) -> AsyncIterator["UnitOfWork"]:
        """Open a session from the database manager and run a unit of work on it."""
        manager = manager or DatabaseManager.get_instance()
        async with manager.sql.session_factory() as session:
            async with cls(session=session) as uow:
                yield uow

    def get_repository(self, repo_class, model_class):
        """Get or create a repository instance (cached per unit of work)."""
        cache_key = f"{repo_class.__name__}_{model_class.__name__}"
        if cache_key not in self._repositories:
            self._repositories[cache_key] = repo_class(self.session)
        return self._repositories[cache_key]

    async def commit(self) -> None:
        """Commit all changes."""
        await self.session.commit()

    async def rollback(self) -> None:
        """Rollback all changes."""
        await self.session.rollback()

    async def flush(self) -> None:
        """Flush session (e.g. to get auto-increment IDs)."""
        await self.session.flush()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            logger.warning(f"Rolling back unit of work: {exc_type.__name__}: {exc_val}")
            await self.rollback()
        else:
            await self.commit()
