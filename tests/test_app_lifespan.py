"""Tests for application startup and shutdown."""

from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from nutritrack.api.app import create_app
from nutritrack.containers import AppContainer
from nutritrack.domain.errors import StoreError


def test_lifespan_opens_and_closes_resources(container: AppContainer) -> None:
    events: list[str] = []

    async def open_resources() -> None:
        events.append("open")

    async def close_resources() -> None:
        events.append("close")

    app = create_app(
        replace(
            container, open_resources=open_resources, close_resources=close_resources
        )
    )

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        assert events == ["open"]

    assert events == ["open", "close"]


def test_startup_fails_when_store_unreachable(container: AppContainer) -> None:
    async def open_resources() -> None:
        raise StoreError("No servers available")

    app = create_app(replace(container, open_resources=open_resources))

    with pytest.raises(StoreError), TestClient(app):
        pass


def test_cors_headers_present(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.options(
        "/api/allergens",
        headers={
            "Origin": "https://app.example",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in {
        "*",
        "https://app.example",
    }
