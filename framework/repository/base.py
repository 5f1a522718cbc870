"""
Repository abstract base class and generic implementation.
"""

from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, TypeVar, Optional, List, Type
from sqlalchemy import delete as sa_delete, inspect
from sqlmodel import SQLModel, select, col, func
from sqlmodel.ext.asyncio.session import AsyncSession

T = TypeVar("T", bound=SQLModel)


class IRepository(ABC, Generic[T]):
    """Repository interface; defines standard CRUD data access API."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert (id unset) or update (id set) an entity."""
        pass

    @abstractmethod
    async def find_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID, None when absent."""
        pass

    @abstractmethod
    async def find_all(self) -> Iterator[T]:
        """Get every entity."""
        pass

    @abstractmethod
    async def delete_by_id(self, id: int) -> None:
        """Delete entity by ID; absent IDs are ignored."""
        pass


class BaseRepository(IRepository[T]):
    """
    Generic SQLModel CRUD repository; subclasses add custom queries.

    Writes are flushed so generated IDs and constraint violations surface
    immediately. Commit/rollback belongs to the caller (see UnitOfWork).
    Backend failures propagate as the original SQLAlchemy exceptions.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        """Initialize repository with session and model."""
        self.session = session
        self.model = model

    async def save(self, entity: T) -> T:
        """Insert or update entity and return the persisted instance."""
        if entity.id is not None:
            identity = inspect(entity).identity
            if identity is not None and identity[0] != entity.id:
                changed_id = entity.id
                entity.id = identity[0]
                raise ValueError(
                    f"{self.model.__name__} id is immutable: {identity[0]} cannot become {changed_id}"
                )
            # Autoflush here would write a pending change before the lookup
            with self.session.sync_session.no_autoflush:
                existing = await self.session.get(self.model, entity.id)
            if existing is None:
                # Row is gone: persist as a new record, IDs are never reused
                entity = self.model(**entity.model_dump(exclude={"id"}))
            elif existing is not entity:
                for key, value in entity.model_dump(exclude={"id"}).items():
                    setattr(existing, key, value)
                entity = existing

        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def save_all(self, entities: Iterable[T]) -> List[T]:
        """Save each entity in order."""
        return [await self.save(entity) for entity in entities]

    async def find_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        statement = select(self.model).where(self.model.id == id)
        result = await self.session.exec(statement)
        return result.first()

    async def find_all(self) -> Iterator[T]:
        """Snapshot of every entity; the iterator can be consumed once."""
        statement = select(self.model)
        result = await self.session.exec(statement)
        return iter(result.all())

    async def find_all_by_id(self, ids: Iterable[int]) -> List[T]:
        """Get entities for the given IDs; missing IDs are skipped."""
        ids = list(ids)
        if not ids:
            return []
        statement = select(self.model).where(col(self.model.id).in_(ids))
        result = await self.session.exec(statement)
        return list(result.all())

    async def exists_by_id(self, id: int) -> bool:
        """Check whether an entity with this ID exists."""
        statement = select(self.model.id).where(self.model.id == id).limit(1)
        result = await self.session.exec(statement)
        return result.first() is not None

    async def count(self) -> int:
        """Count all entities."""
        statement = select(func.count(self.model.id))
        result = await self.session.exec(statement)
        return result.one()

    async def delete_by_id(self, id: int) -> None:
        """Delete entity by ID (idempotent)."""
        entity = await self.session.get(self.model, id)
        if entity is None:
            return
        await self.session.delete(entity)
        await self.session.flush()

    async def delete(self, entity: T) -> None:
        """Delete the given entity; unsaved entities are ignored."""
        if entity.id is None:
            return
        await self.delete_by_id(entity.id)

    async def delete_all(self) -> None:
        """Delete every entity."""
        await self.session.execute(sa_delete(self.model))
        await self.session.flush()
