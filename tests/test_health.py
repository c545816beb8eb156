"""Tests for the health check endpoint."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError


@pytest.fixture
def app():
    """
    Create a minimal FastAPI app with only the health endpoint.

    Returns:
        FastAPI: FastAPI application instance.
    """
    from oillab.api.http.health import router

    test_app = FastAPI()
    test_app.include_router(router)
    return test_app


@pytest.fixture
def client(app):
    """
    Create a test client for the FastAPI application.

    Args:
        app: FastAPI application fixture.

    Returns:
        TestClient: FastAPI test client instance.
    """
    return TestClient(app)


def test_health_endpoint_database_healthy(app, client):
    """Test health endpoint when the database answers."""
    mock_conn = AsyncMock()
    mock_engine = MagicMock()
    mock_engine.connect.return_value.__aenter__.return_value = mock_conn
    app.state.engine = mock_engine

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "healthy"}
    mock_conn.execute.assert_awaited_once()


def test_health_endpoint_database_unhealthy(app, client):
    """Test health endpoint when the database is unreachable."""
    mock_engine = MagicMock()
    mock_engine.connect.side_effect = OperationalError(
        "SELECT 1", {}, Exception("connection refused")
    )
    app.state.engine = mock_engine

    response = client.get("/health")

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "database": "unhealthy"}

