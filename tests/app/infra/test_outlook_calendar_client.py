"""Testes do client Outlook Calendar sobre Microsoft Graph (httpx mockado)."""

from __future__ import annotations

import json

import httpx
import pytest

from app.infra.calendar.outlook_calendar_client import OutlookApiError, OutlookCalendarClient
from app.infra.http import HttpClientConfig, HttpError
from config.settings import OutlookCalendarSettings

BASE_URL = "https://graph.test/v1.0"


def _client(handler, **config: object) -> OutlookCalendarClient:
    return OutlookCalendarClient(
        access_token="ms-token",
        base_url=BASE_URL,
        config=HttpClientConfig(
            transport=httpx.MockTransport(handler),
            backoff_base_seconds=0,
            **config,
        ),
    )


@pytest.mark.asyncio
async def test_get_event_uses_me_events_with_bearer_token() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"id": "AAMk/1", "subject": "Review"})

    event = await _client(handler).get_event("AAMk/1")

    assert event["subject"] == "Review"
    assert seen[0].method == "GET"
    assert str(seen[0].url) == f"{BASE_URL}/me/events/AAMk%2F1"
    assert seen[0].headers["Authorization"] == "Bearer ms-token"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("target", "expected_path"),
    [
        ("me", "/v1.0/me/events"),
        ("", "/v1.0/me/events"),
        ("ana@example.com", "/v1.0/users/ana@example.com/events"),
    ],
)
async def test_create_event_path(target: str, expected_path: str) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"id": "new-1"})

    created = await _client(handler).create_event(target, {"subject": "Standup"})

    assert created == {"id": "new-1"}
    assert seen[0].method == "POST"
    assert seen[0].url.path == expected_path
    assert json.loads(seen[0].content) == {"subject": "Standup"}


@pytest.mark.asyncio
async def test_graph_error_is_raised_with_code() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            404,
            json={"error": {"code": "ErrorItemNotFound", "message": "not found"}},
        )

    with pytest.raises(OutlookApiError) as exc_info:
        await _client(handler).get_event("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.code == "ErrorItemNotFound"


@pytest.mark.asyncio
async def test_invalid_json_response_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>")

    with pytest.raises(OutlookApiError, match="invalid_json"):
        await _client(handler).get_event("x")


@pytest.mark.asyncio
async def test_server_error_is_not_retried_by_default() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(503, json={})

    with pytest.raises(HttpError) as exc_info:
        await _client(handler).create_event("me", {})

    assert exc_info.value.status_code == 503
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_server_error_is_retried_when_configured() -> None:
    responses = iter([httpx.Response(503, json={}), httpx.Response(201, json={"id": "ok"})])
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return next(responses)

    created = await _client(handler, max_retries=1).create_event("me", {})

    assert created == {"id": "ok"}
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_connection_error_becomes_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(HttpError, match="http_connection_error"):
        await _client(handler).get_event("x")


def test_empty_token_is_rejected() -> None:
    with pytest.raises(ValueError, match="MS_ACCESS_TOKEN"):
        OutlookCalendarClient(access_token="  ")


def test_from_settings_applies_timeout_and_retries() -> None:
    client = OutlookCalendarClient.from_settings(
        OutlookCalendarSettings(
            access_token="t",
            graph_base_url="https://graph.test/v1.0/",
            request_timeout_seconds=5.0,
            max_retries=2,
        )
    )

    assert client._base_url == "https://graph.test/v1.0"
    assert client._config.timeout_seconds == 5.0
    assert client._config.max_retries == 2
