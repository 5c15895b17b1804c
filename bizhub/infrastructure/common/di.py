from collections.abc import Awaitable, Callable
from typing import Annotated, TypeVar

from dependency_injector.providers import Provider
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bizhub.config import Settings, get_settings
from bizhub.core import container
from bizhub.database import DatabaseSession, get_session_factory

T = TypeVar("T")


def inject_service(provider: Provider[T]) -> Callable[..., Awaitable[T]]:
    """
    Create a FastAPI dependency for a container provider.

    Overrides the container's session, session factory and settings with the
    request-scoped values for the duration of the provider call. The
    dependency is a coroutine so it runs on the event loop; override, build
    and reset contain no await and cannot interleave with another request.
    """

    async def dependency(
        db: DatabaseSession,
        settings: Annotated[Settings, Depends(get_settings)],
        session_factory: Annotated[
            async_sessionmaker[AsyncSession], Depends(get_session_factory)
        ],
    ) -> T:
        try:
            container.db.override(db)
            container.settings.override(settings)
            container.session_factory.override(session_factory)
            return provider()
        finally:
            # Reset overrides once the service graph is built
            container.db.reset_override()
            container.settings.reset_override()
            container.session_factory.reset_override()

    return dependency
