"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from bizhub.application.filing.mappers import STATIC_URL_PATH
from bizhub.config import Settings, configure_logging, get_settings
from bizhub.database import dispose_engine, get_engine, init_models, initialize_database
from bizhub.exceptions import BizhubError
from bizhub.infrastructure.accommodation.routers import lodgings, rooms, vacations
from bizhub.infrastructure.advertising.routers import (
    advertisement_tiers,
    advertisements,
    affiliates,
)
from bizhub.infrastructure.filing.routers import images, videos
from bizhub.infrastructure.products.routers import products
from bizhub.infrastructure.schools.routers import learners, parents, school_events

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Set up logging, the database and the static files directory."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    settings.STATIC_FILES_DIR.mkdir(parents=True, exist_ok=True)
    initialize_database(settings)
    await init_models(get_engine())
    logger.info("application_started", version=settings.VERSION, environment=settings.ENVIRONMENT)

    yield

    await dispose_engine()
    logger.info("application_stopped")


async def bizhub_error_handler(request: Request, exc: BizhubError) -> JSONResponse:
    logger.warning("request_failed", path=request.url.path, message=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"succeeded": False, "messages": [exc.message], "data": None},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with every router mounted under the API prefix."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=(
            "Advertising, affiliates, product catalogue, schools, accommodation"
            " and media uploads"
        ),
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(BizhubError, bizhub_error_handler)  # type: ignore[arg-type]

    for module in (
        advertisements,
        advertisement_tiers,
        affiliates,
        images,
        videos,
        products,
        learners,
        parents,
        school_events,
        lodgings,
        rooms,
        vacations,
    ):
        app.include_router(module.router, prefix=settings.API_PREFIX)

    app.mount(
        STATIC_URL_PATH,
        StaticFiles(directory=settings.STATIC_FILES_DIR, check_dir=False),
        name="static",
    )

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": settings.VERSION}

    return app


app = create_app()
