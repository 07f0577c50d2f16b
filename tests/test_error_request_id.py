"""Tests for request_id in error responses and the health endpoint."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from structlog.testing import capture_logs

from src.storehub import main

pytestmark = pytest.mark.unit


async def test_http_exception_includes_request_id(client: AsyncClient):
    response = await client.get("/api/v1/nonexistent-endpoint")

    assert response.status_code == 404
    data = response.json()
    assert data["detail"] == "Not Found"
    assert isinstance(data["request_id"], str)
    assert data["request_id"]


async def test_request_id_matches_response_header(client: AsyncClient):
    response = await client.get("/api/v1/me")

    assert response.status_code == 401
    assert response.json()["request_id"] == response.headers["X-Request-ID"]


async def test_incoming_request_id_is_propagated(client: AsyncClient):
    request_id = uuid4().hex

    response = await client.get("/api/v1/me", headers={"X-Request-ID": request_id})

    assert response.json()["request_id"] == request_id


async def test_unhandled_exception_is_500_with_request_id(app: FastAPI):
    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("kaboom")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/boom")

    assert response.status_code == 500
    data = response.json()
    assert data["detail"] == "Internal server error"
    assert data["request_id"]
    assert data["request_id"] == response.headers["X-Request-ID"]


def _session_factory(execute: AsyncMock):
    @asynccontextmanager
    async def fake_get_session(engine=None):
        session = AsyncMock()
        session.execute = execute
        yield session

    return fake_get_session


async def test_health_ok(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(main, "get_session", _session_factory(AsyncMock()))

    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "healthy"}


async def test_health_database_down(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(
        main, "get_session", _session_factory(AsyncMock(side_effect=OSError("refused")))
    )

    response = await client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


async def test_validation_error_includes_request_id(client: AsyncClient, auth_headers, user_id):
    response = await client.post(
        "/api/v1/authorize", json={"brand_id": str(uuid4())}, headers=auth_headers(user_id)
    )

    assert response.status_code == 422
    data = response.json()
    assert data["detail"][0]["loc"][-1] == "action"
    assert data["request_id"] == response.headers["X-Request-ID"]


async def test_request_completed_is_logged(client: AsyncClient):
    with capture_logs() as logs:
        response = await client.get("/api/v1/me", headers={"X-Request-ID": "req-123"})

    completed = [entry for entry in logs if entry["event"] == "request_completed"]
    assert len(completed) == 1
    assert completed[0]["status_code"] == response.status_code == 401
    assert completed[0]["duration_ms"] >= 0


async def test_health_is_not_access_logged(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(main, "get_session", _session_factory(AsyncMock()))

    with capture_logs() as logs:
        await client.get("/health")

    assert not [entry for entry in logs if entry["event"] == "request_completed"]
