"""Shared fixtures for API integration tests."""

import sys
from datetime import date
from pathlib import Path
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from studbook.database import Base, get_db
from studbook.main import app
from studbook.models import Horse, Owner, Sex

from tests.fixtures.factories import create_horse, create_owner, create_parent_link


# Store engine globally but recreate per test session
_test_engine = None
_test_session_factory = None


def get_test_engine():
    """Get or create test engine."""
    global _test_engine
    if _test_engine is None:
        _test_engine = create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            echo=False,
            future=True,
        )
    return _test_engine


def get_test_session_factory():
    """Get or create test session factory."""
    global _test_session_factory
    if _test_session_factory is None:
        _test_session_factory = async_sessionmaker(
            bind=get_test_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )
    return _test_session_factory


@pytest.fixture(scope="function")
async def db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = get_test_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session for tests."""
    session_factory = get_test_session_factory()
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture(scope="function")
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API tests."""
    # Create a dependency override that uses the test session
    async def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up override
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
async def test_owner(db_session: AsyncSession) -> Owner:
    """Create a sample owner for testing."""
    owner = create_owner(first_name="Sarah", last_name="Brennan", email="sarah@example.com")
    db_session.add(owner)
    await db_session.commit()
    await db_session.refresh(owner)
    return owner


@pytest.fixture
async def test_horse(db_session: AsyncSession, test_owner: Owner) -> Horse:
    """Create a sample horse for testing."""
    horse = create_horse(
        name="Wendy",
        date_of_birth=date(2015, 6, 3),
        sex=Sex.FEMALE,
        description="Bay mare",
        owner_id=test_owner.id,
    )
    db_session.add(horse)
    await db_session.commit()
    await db_session.refresh(horse)
    return horse


@pytest.fixture
async def test_pedigree(db_session: AsyncSession) -> dict[str, Horse]:
    """Three generations: child <- (dam, sire), dam <- (granddam, grandsire)."""
    horses = {
        "granddam": create_horse(name="Granddam", date_of_birth=date(1995, 3, 1), sex=Sex.FEMALE),
        "grandsire": create_horse(name="Grandsire", date_of_birth=date(1994, 5, 1), sex=Sex.MALE),
        "dam": create_horse(name="Dam", date_of_birth=date(2010, 4, 1), sex=Sex.FEMALE),
        "sire": create_horse(name="Sire", date_of_birth=date(2008, 2, 1), sex=Sex.MALE),
        "child": create_horse(name="Foal", date_of_birth=date(2022, 6, 15), sex=Sex.MALE),
    }
    db_session.add_all(horses.values())
    await db_session.commit()

    db_session.add_all([
        create_parent_link(horses["dam"].id, horses["granddam"].id),
        create_parent_link(horses["dam"].id, horses["grandsire"].id),
        create_parent_link(horses["child"].id, horses["dam"].id),
        create_parent_link(horses["child"].id, horses["sire"].id),
    ])
    await db_session.commit()
    for horse in horses.values():
        await db_session.refresh(horse)
    return horses
