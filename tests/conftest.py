"""Shared test fixtures — async DB, client, factories.

Uses SQLite + aiosqlite in memory so every test runs against a fresh schema.
"""

from __future__ import annotations

import os

# Set test SECRET_KEY before any other import touches pydantic-settings
os.environ.setdefault("SECRET_KEY", "test-secret-for-ci-do-not-use-in-production")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from hrms.database import Base, build_engine, build_session_factory, get_db
from hrms.main import create_app

# Import ALL model modules so SQLAlchemy can resolve cross-module relationships
import hrms.auth.models  # noqa: F401
import hrms.employees.models  # noqa: F401
import hrms.leaves.models  # noqa: F401


# ── Test database (SQLite in-memory) ────────────────────────────────

TEST_DATABASE_URL = "sqlite+aiosqlite://"

engine = build_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionFactory = build_session_factory(engine)


@pytest.fixture(autouse=True)
async def _setup_db():
    """Create all tables before each test, drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── FastAPI test client ─────────────────────────────────────────────

@pytest.fixture
async def app():
    """Create a fresh app instance with DB dependency overridden."""
    application = create_app()
    application.dependency_overrides[get_db] = _override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client wired to the test app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# ── Database session (for direct DB operations in tests) ────────────

@pytest.fixture
async def db() -> AsyncGenerator[AsyncSession, None]:
    async with TestSessionFactory() as session:
        yield session
        await session.commit()


# ── Payload factories ───────────────────────────────────────────────

@pytest.fixture
def employee_payload():
    def _make(**overrides) -> dict:
        payload = {
            "name": "Asha",
            "department": "Eng",
            "role": "SWE",
            "email": "a@x.com",
            "phone": "555",
            "joiningDate": "2024-01-15",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
async def created_employee(client, employee_payload) -> dict:
    """POST one employee through the API and return the response body."""
    resp = await client.post("/employees", json=employee_payload())
    assert resp.status_code == 200
    return resp.json()


@pytest.fixture
def leave_payload():
    def _make(employee_id: int, **overrides) -> dict:
        payload = {
            "employeeId": employee_id,
            "startDate": "2024-03-01",
            "endDate": "2024-03-05",
            "leaveType": "Casual",
            "reason": "Family trip",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def user_payload():
    def _make(**overrides) -> dict:
        payload = {
            "name": "Ravi",
            "email": "ravi@acme.io",
            "password": "s3cret-pass",
            "role": "admin",
        }
        payload.update(overrides)
        return payload

    return _make
