"""
Simple test cases to verify test configuration.
"""
import pytest
from sqlalchemy import inspect
from sqlmodel.ext.asyncio.session import AsyncSession

@pytest.mark.asyncio
async def test_database_session(async_session: AsyncSession):
    """Test that database session works."""
    assert async_session is not None
    # Run a simple query
    from sqlalchemy import text
    result = await async_session.execute(text("SELECT 1"))
    assert result.scalar() == 1

@pytest.mark.asyncio
async def test_employees_table_created(async_session: AsyncSession):
    """Test that the employees table exists with its columns."""
    conn = await async_session.connection()
    columns = await conn.run_sync(
        lambda sync_conn: [c["name"] for c in inspect(sync_conn).get_columns("employees")]
    )
    assert columns == ["id", "first_name", "last_name"]
