"""
Startup validation functions for environment variables and service connections.

This module implements fail-fast validation to ensure the application does not
start with invalid configuration or an unavailable database. All validations
run during application startup, before accepting any requests.
"""

from pydantic import SecretStr
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from oillab.logging import logger
from oillab.settings import Settings

REQUIRED_SETTINGS = (
    "APP_MODE",
    "APP_SECRET",
    "APP_ORIGIN",
    "APP_PORT",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "S3_ENDPOINT",
    "S3_ACCESS_KEY_ID",
    "S3_SECRET_ACCESS_KEY",
    "S3_REGION",
    "S3_BUCKET",
    "S3_URL",
)


class StartupValidationError(Exception):
    """
    Exception raised when startup validation fails.

    This exception indicates that the application cannot start due to
    missing or invalid configuration, or an unavailable database.
    """

    pass


def missing_settings(settings: Settings) -> list[str]:
    """Names of required settings that are empty, in declaration order."""
    missing = []
    for key in REQUIRED_SETTINGS:
        value = getattr(settings, key)
        if isinstance(value, SecretStr):
            value = value.get_secret_value()
        if value in ("", None):
            missing.append(key)
    return missing


def validate_settings(settings: Settings) -> None:
    """
    Validate required environment variables and configuration.

    Raises:
        StartupValidationError: Naming the first required setting that is
            missing.
    """
    logger.info("Validating application settings...")

    missing = missing_settings(settings)
    if missing:
        raise StartupValidationError(
            f"{missing[0]} environment variable is required"
        )

    if settings.MAX_PAGE_SIZE < 1:
        raise StartupValidationError("MAX_PAGE_SIZE must be at least 1")
    if not 1 <= settings.DEFAULT_PAGE_SIZE <= settings.MAX_PAGE_SIZE:
        raise StartupValidationError(
            "DEFAULT_PAGE_SIZE must be between 1 and MAX_PAGE_SIZE"
        )

    logger.info("Application settings validation passed")


async def validate_database_connection(engine: AsyncEngine) -> None:
    """
    Validate database connectivity at startup.

    Attempts to connect to the database and execute a simple query to
    verify the connection is working.

    Raises:
        StartupValidationError: If database connection fails
    """
    logger.info("Validating database connection...")

    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1 AS health_check"))
            row = result.fetchone()
    except (SQLAlchemyError, OSError) as ex:
        raise StartupValidationError(
            f"Database connection failed: {ex}. "
            f"Verify DB_HOST, DB_PORT, DB_USER, DB_PASSWORD settings."
        ) from ex

    if not row or row[0] != 1:
        raise StartupValidationError(
            "Database health check query returned unexpected result"
        )

    logger.info(f"Database connection validated: {engine.url.render_as_string()}")


async def run_all_validations(settings: Settings, engine: AsyncEngine) -> None:
    """
    Run all startup validation checks.

    The validations run in order:
    1. Settings validation (environment variables)
    2. Database connection validation

    Raises:
        StartupValidationError: If any validation fails
    """
    logger.info("Starting application startup validations...")

    try:
        validate_settings(settings)
        await validate_database_connection(engine)
        logger.info("All startup validations passed successfully")
    except StartupValidationError as ex:
        logger.error(f"Startup validation failed: {ex}")
        logger.error(
            "Application will not start. Fix the configuration errors "
            "and try again."
        )
        raise
