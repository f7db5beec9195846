"""
Pytest configuration and fixtures for API tests.

This module provides:
- A fresh in-memory SQLite database per test (schema from SQLModel metadata)
- A database session bound to that database
- FastAPI test client with the session dependency overridden
- Factory fixtures for creating test data
"""

import os
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from apartments_api.database import build_engine, get_session
from apartments_api.main import app
from apartments_api.models import Apartment
from tests.factories import ApartmentFactory


# =============================================================================
# Database fixtures (fresh for each test)
# =============================================================================


@pytest.fixture
def test_database_url() -> str:
    """
    Get the test database URL from the environment or use in-memory SQLite.

    Set TEST_DATABASE_URL to an empty database to run against PostgreSQL.
    """
    return os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def test_engine(test_database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """
    Create an async engine with all tables created.

    StaticPool keeps the single in-memory SQLite connection alive for the test.
    """
    engine = build_engine(test_database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session for a single test."""
    async with AsyncSession(test_engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Provide an async HTTP client for testing FastAPI endpoints.

    The get_session dependency is overridden so API calls and direct database
    access in the test share one session.
    """

    async def override_get_session():
        yield test_session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def raw_client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Like client, but returns 500 responses instead of re-raising app errors."""

    async def override_get_session():
        yield test_session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Factory fixtures for creating test data
# =============================================================================


@pytest.fixture
async def apartment_factory(test_session: AsyncSession):
    """
    Factory fixture for creating Apartment rows in the test database.

    Usage:
        apartment = await apartment_factory(project="Palm Hills", price=Decimal("1500000"))
    """

    async def _create_apartment(**kwargs) -> Apartment:
        apartment = ApartmentFactory.build(**kwargs)
        test_session.add(apartment)
        await test_session.commit()
        await test_session.refresh(apartment)
        return apartment

    return _create_apartment


@pytest.fixture
async def seeded_prices(apartment_factory):
    """
    Five apartments with distinct prices, created one minute apart.

    Returns the created apartments oldest first.
    """
    base = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    prices = ["1500000", "2200000", "1800000", "3000000", "1350000"]
    created = []
    for i, price in enumerate(prices):
        created.append(
            await apartment_factory(
                price=Decimal(price),
                created_at=base + timedelta(minutes=i),
                updated_at=base + timedelta(minutes=i),
            )
        )
    return created
