# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
#   uvicorn oillab:application --factory
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from oillab.logging import logger, setup_logging
from oillab.middlewares.correlation_id import CorrelationIDMiddleware
from oillab.routing import collect_subrouters
from oillab.settings import Settings, get_settings
from oillab.startup_validation import run_all_validations
from oillab.storage.db import (
    create_engine,
    create_session_factory,
    wait_and_init_db,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup and shutdown.

    Startup operations:
    - Waits for the database with retries
    - Runs startup validations (settings and database connectivity)

    Shutdown operations:
    - Disposes the database engine and its connection pool
    """
    settings: Settings = app.state.settings
    engine = app.state.engine

    logger.info("Application startup: initializing resources")

    await wait_and_init_db(
        engine,
        retry_interval=settings.DB_INIT_RETRY_INTERVAL,
        max_retries=settings.DB_INIT_MAX_RETRIES,
    )
    await run_all_validations(settings, engine)

    yield  # Application runs here

    logger.info("Application shutdown: cleaning up resources")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application(settings: Settings | None = None) -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    The settings object is built once (from the environment unless one is
    passed in) and stored on ``app.state`` together with the database
    engine and session factory, so every request handler and dependency
    reads the same configuration.

    Middlewares:
    - `CORSMiddleware`: allows the origins listed in ``APP_ORIGIN``.
    - `CorrelationIDMiddleware`: request correlation IDs for logging.

    Args:
        settings: Explicit settings, mainly for tests.

    Returns:
        The configured FastAPI application.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Oil lab API",
        description="Lubricant catalogue and oil analysis reports",
        version="1.0.0",
        lifespan=lifespan,
    )

    engine = create_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.include_router(collect_subrouters())

    # Middlewares (execute in REVERSE order of registration)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationIDMiddleware)

    return app
