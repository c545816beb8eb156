"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for settings, an in-memory SQLite
database and seeded lubricant/report rows.
"""

from datetime import date, datetime, timezone

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from oillab.models.lubricant import Lubricant, ProductType
from oillab.models.report import Report
from tests.mocks.settings_mocks import create_test_settings


@pytest.fixture
def settings():
    """
    Provides valid application settings.

    Returns:
        Settings: Settings with all required values set
    """
    return create_test_settings()


@pytest_asyncio.fixture
async def engine():
    """
    Provides an in-memory SQLite engine with all tables created.

    Yields:
        AsyncEngine: Engine bound to a fresh database
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    """
    Provides a session on the in-memory database.

    Yields:
        AsyncSession: Database session
    """
    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def lubricants(session):
    """
    Seeds four lubricants, two per brand.

    Returns:
        list[Lubricant]: Rows in insertion (id) order
    """
    rows = [
        Lubricant(
            product_type=ProductType.ENGINE_OIL,
            model="Helix Ultra",
            brand="Shell",
            viscosity="5W-40",
        ),
        Lubricant(
            product_type=ProductType.ENGINE_OIL,
            model="Edge",
            brand="Castrol",
            viscosity="5W-30",
        ),
        Lubricant(
            product_type=ProductType.HYDRAULIC_OIL,
            model="Rimula R4",
            brand="Shell",
            viscosity="15W-40",
        ),
        Lubricant(
            product_type=ProductType.GEAR_OIL,
            model="Magnatec",
            brand="Castrol",
            viscosity="10W-40",
        ),
    ]
    session.add_all(rows)
    await session.commit()
    return rows


@pytest_asyncio.fixture
async def reports(session, lubricants):
    """
    Seeds three reports for two clients.

    Returns:
        list[Report]: Rows in insertion (id) order
    """
    rows = [
        Report(
            form_number="A-001",
            client="Acme Mining",
            vehicle="CAT 793",
            sampled_at=date(2026, 3, 1),
            lubricant_id=lubricants[0].id,
            created_at=datetime(2026, 3, 2, tzinfo=timezone.utc),
        ),
        Report(
            form_number="A-002",
            client="Acme Mining",
            vehicle="Komatsu 930E",
            sampled_at=date(2026, 2, 14),
            lubricant_id=lubricants[2].id,
            created_at=datetime(2026, 2, 15, tzinfo=timezone.utc),
        ),
        Report(
            form_number=None,
            client="Harbor Logistics",
            vehicle="Forklift 12",
            sampled_at=date(2026, 4, 9),
            lubricant_id=lubricants[1].id,
            created_at=datetime(2026, 4, 10, tzinfo=timezone.utc),
        ),
    ]
    session.add_all(rows)
    await session.commit()
    return rows
