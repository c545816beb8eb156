import asyncio
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from oillab.logging import logger
from oillab.settings import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database.

    Args:
        settings: Application settings with database credentials and pool
            options.

    Returns:
        AsyncEngine bound to ``settings.DATABASE_URL``.
    """
    return create_async_engine(
        settings.DATABASE_URL,
        echo=False,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=settings.DB_POOL_PRE_PING,
    )


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine, expire_on_commit=False, class_=AsyncSession
    )


async def wait_and_init_db(
    engine: AsyncEngine,
    retry_interval: int,
    max_retries: int,
) -> None:
    """
    Wait until the database is available.

    Database schema is managed by Alembic migrations; this only waits for
    connectivity.

    Args:
        engine: Engine to probe.
        retry_interval: Time in seconds between retries.
        max_retries: Maximum number of retries before giving up.

    Raises:
        RuntimeError: If the database is still unreachable after
            ``max_retries`` attempts.
    """
    for attempt in range(max_retries):
        try:
            async with engine.connect() as conn:
                await conn.exec_driver_sql("SELECT 1")
            logger.info("Database is now ready.")
            return
        except OperationalError:
            logger.warning(
                f"Database not ready, retrying in {retry_interval} seconds... (Attempt {attempt + 1}/{max_retries})"
            )
            await asyncio.sleep(retry_interval)

    logger.error("Failed to connect to the database after multiple attempts.")
    raise RuntimeError("Database connection could not be established.")


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Yield a request-scoped session and commit it when the handler succeeds.

    The session factory is created once by the application factory and
    stored on ``app.state``.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    session_factory: async_sessionmaker[AsyncSession] = (
        request.app.state.session_factory
    )
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except IntegrityError as ex:
            await session.rollback()
            logger.error(f"Database integrity error: {ex}")
            raise
        except SQLAlchemyError as ex:
            await session.rollback()
            logger.error(f"Database error: {ex}")
            raise
