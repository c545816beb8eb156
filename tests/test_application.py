"""Tests for the application factory."""

from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from oillab import application


class TestApplication:
    """Tests for application()."""

    def test_routes_registered(self, settings):
        """Test every HTTP module is collected."""
        app = application(settings)

        paths = {route.path for route in app.routes}

        assert {
            "/health",
            "/lubricants",
            "/lubricants/list",
            "/lubricants/{lubricant_id}",
            "/reports",
            "/reports/list",
            "/reports/{report_id}",
        } <= paths

    def test_state(self, settings):
        """Test settings and database wiring are stored on the app."""
        app = application(settings)

        assert app.state.settings is settings
        assert app.state.engine.url.database == "oillab_test"
        assert app.state.session_factory is not None

    def test_lifespan_runs_startup_checks(self, settings):
        """Test startup waits for the database and validates."""
        app = application(settings)

        with (
            patch("oillab.wait_and_init_db", new=AsyncMock()) as wait_mock,
            patch("oillab.run_all_validations", new=AsyncMock()) as validate_mock,
        ):
            with TestClient(app):
                pass

        wait_mock.assert_awaited_once_with(
            app.state.engine,
            retry_interval=settings.DB_INIT_RETRY_INTERVAL,
            max_retries=settings.DB_INIT_MAX_RETRIES,
        )
        validate_mock.assert_awaited_once_with(settings, app.state.engine)

    def test_cors_preflight(self, settings):
        """Test configured origins are allowed."""
        client = TestClient(application(settings))

        response = client.options(
            "/lubricants/list",
            headers={
                "Origin": "http://localhost:8080",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.status_code == 200
        assert (
            response.headers["access-control-allow-origin"]
            == "http://localhost:8080"
        )
