"""Tests for fail-fast startup validation."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from oillab.settings import Settings
from oillab.startup_validation import (
    REQUIRED_SETTINGS,
    StartupValidationError,
    missing_settings,
    run_all_validations,
    validate_database_connection,
    validate_settings,
)
from tests.mocks.settings_mocks import create_test_settings


class TestValidateSettings:
    """Tests for validate_settings."""

    def test_valid_settings(self, settings):
        """Test complete settings pass."""
        validate_settings(settings)

    @pytest.mark.parametrize(
        "key", ["APP_SECRET", "APP_ORIGIN", "DB_USER", "DB_PASSWORD", "S3_BUCKET"]
    )
    def test_missing_value_named(self, key):
        """Test the missing key is named in the error."""
        settings = create_test_settings(**{key: ""})

        with pytest.raises(StartupValidationError, match=key):
            validate_settings(settings)

    def test_all_missing_listed(self):
        """Test every empty required setting is reported."""
        settings = create_test_settings(S3_URL="", APP_SECRET="")

        assert missing_settings(settings) == ["APP_SECRET", "S3_URL"]

    def test_unset_environment_reports_every_key(self, monkeypatch):
        """Test no required setting is satisfied by a built-in default."""
        for key in REQUIRED_SETTINGS:
            monkeypatch.delenv(key, raising=False)

        settings = Settings(_env_file=None)

        assert missing_settings(settings) == list(REQUIRED_SETTINGS)

    @pytest.mark.parametrize(
        "key,value", [("APP_MODE", ""), ("APP_PORT", None), ("DB_PORT", None)]
    )
    def test_unset_mode_and_ports_rejected(self, key, value):
        """Test mode and ports must come from the environment."""
        settings = create_test_settings(**{key: value})

        with pytest.raises(StartupValidationError, match=key):
            validate_settings(settings)

    def test_default_page_size_above_maximum(self):
        """Test the default page size must fit under the maximum."""
        settings = create_test_settings(DEFAULT_PAGE_SIZE=50, MAX_PAGE_SIZE=20)

        with pytest.raises(StartupValidationError, match="DEFAULT_PAGE_SIZE"):
            validate_settings(settings)

    def test_maximum_page_size_positive(self):
        """Test a zero maximum is rejected."""
        settings = create_test_settings(MAX_PAGE_SIZE=0, DEFAULT_PAGE_SIZE=0)

        with pytest.raises(StartupValidationError, match="MAX_PAGE_SIZE"):
            validate_settings(settings)


class TestValidateDatabaseConnection:
    """Tests for validate_database_connection."""

    @pytest.mark.asyncio
    async def test_reachable_database(self, engine):
        """Test a working database passes."""
        await validate_database_connection(engine)

    @pytest.mark.asyncio
    async def test_unreachable_database(self):
        """Test connection failures become StartupValidationError."""
        engine = MagicMock()
        engine.connect.side_effect = OperationalError(
            "SELECT 1", {}, Exception("connection refused")
        )

        with pytest.raises(StartupValidationError, match="Database connection failed"):
            await validate_database_connection(engine)


class TestRunAllValidations:
    """Tests for run_all_validations."""

    @pytest.mark.asyncio
    async def test_all_pass(self, settings, engine):
        """Test valid settings and a reachable database pass."""
        await run_all_validations(settings, engine)

    @pytest.mark.asyncio
    async def test_settings_checked_before_database(self):
        """Test invalid settings fail without touching the database."""
        engine = MagicMock()

        with pytest.raises(StartupValidationError, match="APP_SECRET"):
            await run_all_validations(
                create_test_settings(APP_SECRET=""), engine
            )

        engine.connect.assert_not_called()
