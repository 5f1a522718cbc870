"""Test config and shared fixtures."""
import pytest
from typing import AsyncGenerator, List
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from framework.repository.unit_of_work import UnitOfWork
from apps.employees.models import Employee
from apps.employees.repository import EmployeeStore


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Create async test database session."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session_maker = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def store(async_session: AsyncSession) -> EmployeeStore:
    """Case-sensitive employee store on the test session."""
    return EmployeeStore(async_session, case_sensitive=True)


@pytest.fixture
def uow(async_session: AsyncSession) -> UnitOfWork:
    return UnitOfWork(session=async_session)


@pytest.fixture
async def sample_employees(store: EmployeeStore) -> List[Employee]:
    """Smith, Smithson and Jones, already persisted."""
    return await store.save_all([
        Employee(first_name="John", last_name="Smith"),
        Employee(first_name="Anna", last_name="Smithson"),
        Employee(first_name="Mary", last_name="Jones"),
    ])


@pytest.fixture
def sqlite_settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    from framework.config import Settings
    return Settings(
        DB_DRIVER="sqlite+aiosqlite",
        DB_NAME=str(tmp_path / "employees.db"),
        _env_file=None,
    )


@pytest.fixture
async def sqlite_manager(sqlite_settings):
    """DatabaseManager on a SQLite file with tables created."""
    from framework.database.manager import DatabaseManager
    manager = DatabaseManager(sqlite_settings)
    await manager.sql.create_tables()
    yield manager
    await manager.sql.disconnect()
