"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check
from app.domain.calendar_event import DestinationConfig
from app.services.destination_registry import DestinationRegistry
from tests.fakes.fake_calendar_clients import FakeOutlookCalendarClient


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_check_is_always_healthy() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "calendar-relay"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_dependencies() -> None:
    request = _build_request_with_state(SimpleNamespace())

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["google"]["status"] == "failed"
    assert payload["checks"]["outlook"]["error"] == "not_configured"
    assert payload["destinations"] == 0


@pytest.mark.asyncio
async def test_readiness_returns_ready_with_one_client_and_destinations() -> None:
    registry = DestinationRegistry(
        [DestinationConfig(name="Personal Outlook", provider="outlook", calendar_id="me")]
    )
    request = _build_request_with_state(
        SimpleNamespace(
            google_client=None,
            outlook_client=FakeOutlookCalendarClient(),
            destination_registry=registry,
        )
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["outlook"]["status"] == "ok"
    assert payload["destinations"] == 1


@pytest.mark.asyncio
async def test_readiness_not_ready_with_empty_registry() -> None:
    request = _build_request_with_state(
        SimpleNamespace(
            google_client=FakeOutlookCalendarClient(),
            outlook_client=None,
            destination_registry=DestinationRegistry(()),
        )
    )

    response = await readiness_check(request)

    assert response.status_code == 503
