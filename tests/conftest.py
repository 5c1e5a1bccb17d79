"""Shared test fixtures."""

import sys
from datetime import date
from pathlib import Path
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from studbook.database import Base
from studbook.models import Horse, Owner, Sex

from tests.fixtures.factories import create_horse, create_owner, create_parent_link


@pytest.fixture
async def db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session with transaction rollback."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def test_owner(db_session: AsyncSession) -> Owner:
    """Create a sample owner for testing."""
    owner = create_owner(first_name="Sarah", last_name="Brennan", email="sarah@example.com")
    db_session.add(owner)
    await db_session.flush()
    return owner


@pytest.fixture
async def test_horse(db_session: AsyncSession, test_owner: Owner) -> Horse:
    """Create a sample horse without parents."""
    horse = create_horse(
        name="Wendy",
        date_of_birth=date(2015, 6, 3),
        sex=Sex.FEMALE,
        description="Bay mare",
        owner_id=test_owner.id,
    )
    db_session.add(horse)
    await db_session.flush()
    return horse


@pytest.fixture
async def test_mother(db_session: AsyncSession) -> Horse:
    """Mare born 2010."""
    horse = create_horse(name="Mother Horse", date_of_birth=date(2010, 1, 1), sex=Sex.FEMALE)
    db_session.add(horse)
    await db_session.flush()
    return horse


@pytest.fixture
async def test_father(db_session: AsyncSession) -> Horse:
    """Stallion born 2008."""
    horse = create_horse(name="Father Horse", date_of_birth=date(2008, 1, 1), sex=Sex.MALE)
    db_session.add(horse)
    await db_session.flush()
    return horse


@pytest.fixture
async def test_pedigree(db_session: AsyncSession) -> dict[str, Horse]:
    """Three generations: child <- (dam, sire), dam <- (granddam, grandsire).

    The sire has no recorded parents.
    """
    horses = {
        "granddam": create_horse(name="Granddam", date_of_birth=date(1995, 3, 1), sex=Sex.FEMALE),
        "grandsire": create_horse(name="Grandsire", date_of_birth=date(1994, 5, 1), sex=Sex.MALE),
        "dam": create_horse(name="Dam", date_of_birth=date(2010, 4, 1), sex=Sex.FEMALE),
        "sire": create_horse(name="Sire", date_of_birth=date(2008, 2, 1), sex=Sex.MALE),
        "child": create_horse(name="Foal", date_of_birth=date(2022, 6, 15), sex=Sex.MALE),
    }
    db_session.add_all(horses.values())
    await db_session.flush()

    db_session.add_all([
        create_parent_link(horses["dam"].id, horses["granddam"].id),
        create_parent_link(horses["dam"].id, horses["grandsire"].id),
        create_parent_link(horses["child"].id, horses["dam"].id),
        create_parent_link(horses["child"].id, horses["sire"].id),
    ])
    await db_session.flush()
    return horses
