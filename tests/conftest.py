"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from employee_api.config import DEFAULT_ROLES_FILE, Settings
from employee_api.db.accessor import StorageAccessor
from employee_api.db.models import Employee
from employee_api.db.seed import create_schema
from employee_api.lookup.roles import load_roles
from employee_api.main import create_app

IN_MEMORY_URL = "sqlite+aiosqlite://"


def build_employee_rows(count: int, start: int = 1) -> list[dict]:
    """Rows named "Person 01", "Person 02", ...; odd numbers female, even male."""
    rows = []
    for i in range(start, start + count):
        rows.append(
            {
                "name": f"Person {i:02d}",
                "email": f"person.{i:02d}@faux-ltd.com",
                "sex": "female" if i % 2 else "male",
            }
        )
    return rows


@pytest.fixture
def make_employees():
    return build_employee_rows


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url=IN_MEMORY_URL,
        generate_data=False,
        generate_data_if_empty=False,
    )


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database with the employees table, one per test."""
    engine = create_async_engine(IN_MEMORY_URL, poolclass=StaticPool)
    await create_schema(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def populate(engine):
    """Insert employee rows: `await populate(make_employees(25))`."""

    async def _populate(rows: list[dict]) -> None:
        async with engine.begin() as conn:
            await conn.execute(insert(Employee), rows)

    return _populate


@pytest.fixture
def accessor(engine) -> StorageAccessor:
    return StorageAccessor(engine, timeout_seconds=5.0)


@pytest.fixture
def app(test_settings, engine, accessor):
    """App wired to the in-memory engine without running the lifespan."""
    app = create_app(test_settings)
    app.state.engine = engine
    app.state.accessor = accessor
    app.state.role_store = load_roles(DEFAULT_ROLES_FILE)
    return app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
