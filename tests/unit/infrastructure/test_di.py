"""Tests for the request-scoped container dependency."""

import asyncio
import inspect

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bizhub.config import Settings
from bizhub.core import container
from bizhub.infrastructure.common.di import inject_service


class TestInjectService:
    def test_dependency_runs_on_the_event_loop(self) -> None:
        dependency = inject_service(container.product_repository)

        assert inspect.iscoroutinefunction(dependency)

    @pytest.mark.asyncio
    async def test_overlapping_calls_keep_their_own_session(self, settings: Settings) -> None:
        dependency = inject_service(container.product_repository)
        first_session, second_session = AsyncSession(), AsyncSession()
        factory = async_sessionmaker()

        first, second = await asyncio.gather(
            dependency(db=first_session, settings=settings, session_factory=factory),
            dependency(db=second_session, settings=settings, session_factory=factory),
        )

        assert first.db is first_session
        assert second.db is second_session

    @pytest.mark.asyncio
    async def test_overrides_are_reset_after_each_call(self, settings: Settings) -> None:
        dependency = inject_service(container.affiliate_query_service)

        service = await dependency(
            db=AsyncSession(), settings=settings, session_factory=async_sessionmaker()
        )

        assert service.affiliate_repository is not None
        assert container.db.overridden == ()
        assert container.settings.overridden == ()
        assert container.session_factory.overridden == ()
