"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bizhub import models
from bizhub.config import Settings, get_settings
from bizhub.database import (
    create_engine_for,
    create_session_factory,
    get_session_factory,
    init_models,
)
from bizhub.domain.advertising import AdvertisementType, ReviewStatus


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a throwaway database and static files directory."""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        ENVIRONMENT="test",
        API_BASE_ADDRESS="http://test",
        STATIC_FILES_DIR=tmp_path / "StaticFiles",
    )


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh database with every table for each test."""
    engine = create_engine_for(settings.DATABASE_URL)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(
    settings: Settings, session_factory: async_sessionmaker[AsyncSession]
) -> AsyncGenerator[AsyncClient, None]:
    """Create an API client bound to the test database and settings."""
    from bizhub.main import app  # noqa: PLC0415

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def create_test_tier(
    db_session: AsyncSession, name: str = "Gold", price: str = "99.00", days: int = 30
) -> models.AdvertisementTier:
    """Create an advertisement tier directly in the database."""
    tier = models.AdvertisementTier(name=name, price=Decimal(price), days=days)
    db_session.add(tier)
    await db_session.commit()
    return tier


async def create_test_advertisement(
    db_session: AsyncSession,
    title: str = "Spring Sale",
    status: ReviewStatus = ReviewStatus.PENDING,
    tier: models.AdvertisementTier | None = None,
    **kwargs: object,
) -> models.Advertisement:
    """Create an advertisement directly in the database."""
    advertisement = models.Advertisement(
        title=title,
        status=status,
        advertisement_type=kwargs.pop("advertisement_type", AdvertisementType.BANNER),
        advertisement_tier_id=tier.id if tier is not None else None,
        **kwargs,
    )
    db_session.add(advertisement)
    await db_session.commit()
    return advertisement


async def create_test_affiliate(
    db_session: AsyncSession, title: str, display_order: int
) -> models.Affiliate:
    affiliate = models.Affiliate(title=title, display_order=display_order)
    db_session.add(affiliate)
    await db_session.commit()
    return affiliate


async def create_test_product(
    db_session: AsyncSession, name: str, **kwargs: object
) -> models.Product:
    """Create a product directly in the database."""
    product = models.Product(
        name=name,
        display_name=kwargs.pop("display_name", name),
        slug=kwargs.pop("slug", name.lower().replace(" ", "-")),
        **kwargs,
    )
    db_session.add(product)
    await db_session.commit()
    return product


async def create_test_parent(
    db_session: AsyncSession, first_name: str, email: str | None = None, **kwargs: object
) -> models.Parent:
    parent = models.Parent(
        first_name=first_name, last_name=kwargs.pop("last_name", "Smith"), email=email, **kwargs
    )
    db_session.add(parent)
    await db_session.commit()
    return parent


async def create_test_learner(
    db_session: AsyncSession,
    first_name: str,
    parents: list[models.Parent] | None = None,
    **kwargs: object,
) -> models.Learner:
    """Create a learner linked to the given parents."""
    learner = models.Learner(
        first_name=first_name, last_name=kwargs.pop("last_name", "Smith"), **kwargs
    )
    learner.parents = [
        models.LearnerParent(parent_id=parent.id, parent_consent_required=parent.require_consent)
        for parent in parents or []
    ]
    db_session.add(learner)
    await db_session.commit()
    return learner


async def create_test_school_event(
    db_session: AsyncSession,
    heading: str,
    start_date: datetime,
    learners: list[models.Learner] | None = None,
    **kwargs: object,
) -> models.SchoolEvent:
    """Create a published school event with the given participants."""
    event = models.SchoolEvent(
        heading=heading,
        start_date=start_date,
        published=kwargs.pop("published", True),
        **kwargs,
    )
    event.participants = [
        models.SchoolEventParticipant(learner_id=learner.id) for learner in learners or []
    ]
    db_session.add(event)
    await db_session.commit()
    return event


async def create_test_lodging(
    db_session: AsyncSession, name: str, **kwargs: object
) -> models.Lodging:
    lodging = models.Lodging(name=name, **kwargs)
    db_session.add(lodging)
    await db_session.commit()
    return lodging


async def create_test_vacation(
    db_session: AsyncSession, name: str, **kwargs: object
) -> models.Vacation:
    vacation = models.Vacation(
        name=name, slug=kwargs.pop("slug", name.lower().replace(" ", "-")), **kwargs
    )
    db_session.add(vacation)
    await db_session.commit()
    return vacation
