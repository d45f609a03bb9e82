"""Testes unitarios para o client de Google Calendar."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_client import GoogleCalendarClient, http_status
from config.settings import GoogleCalendarSettings


class _Request:
    def __init__(self, result: dict[str, Any] | Exception) -> None:
        self._result = result

    def execute(self) -> dict[str, Any]:
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


class _EventsResource:
    """Imita service.events() registrando os parametros recebidos."""

    def __init__(self, result: dict[str, Any] | Exception) -> None:
        self._result = result
        self.list_kwargs: dict[str, Any] = {}
        self.insert_kwargs: dict[str, Any] = {}

    def list(self, **kwargs: Any) -> _Request:
        self.list_kwargs = kwargs
        return _Request(self._result)

    def insert(self, **kwargs: Any) -> _Request:
        self.insert_kwargs = kwargs
        return _Request(self._result)


def _build_client(
    monkeypatch: pytest.MonkeyPatch,
    result: dict[str, Any] | Exception,
) -> tuple[GoogleCalendarClient, _EventsResource]:
    events = _EventsResource(result)

    def _fake_init(self: GoogleCalendarClient, *, settings: GoogleCalendarSettings) -> None:
        # Sem autenticacao real nem discovery de rede.
        _ = settings
        self._service = SimpleNamespace(events=lambda: events)

    monkeypatch.setattr(GoogleCalendarClient, "__init__", _fake_init)
    return GoogleCalendarClient(settings=GoogleCalendarSettings(access_token="t")), events


class _Response(dict):
    """Imita httplib2.Response (dict de headers com status e reason)."""

    def __init__(self, status: int) -> None:
        super().__init__({"status": str(status)})
        self.status = status
        self.reason = "err"


def _http_error(status: int) -> HttpError:
    return HttpError(resp=_Response(status), content=b"{}")


@pytest.mark.asyncio
async def test_list_recent_events_sends_query(monkeypatch: pytest.MonkeyPatch) -> None:
    client, events = _build_client(monkeypatch, {"items": [{"id": "evt-1"}, "lixo"]})

    items = await client.list_recent_events(
        "primary",
        time_min="2024-01-01T00:00:00+00:00",
        max_results=1,
        single_events=True,
        order_by="updated",
    )

    assert items == [{"id": "evt-1"}]
    assert events.list_kwargs == {
        "calendarId": "primary",
        "maxResults": 1,
        "singleEvents": True,
        "orderBy": "updated",
        "timeMin": "2024-01-01T00:00:00+00:00",
    }


@pytest.mark.asyncio
async def test_list_recent_events_without_items(monkeypatch: pytest.MonkeyPatch) -> None:
    client, events = _build_client(monkeypatch, {})

    assert await client.list_recent_events("primary") == []
    assert "timeMin" not in events.list_kwargs


@pytest.mark.asyncio
async def test_insert_event_targets_calendar(monkeypatch: pytest.MonkeyPatch) -> None:
    client, events = _build_client(monkeypatch, {"id": "new-1"})
    body = {"summary": "Standup"}

    created = await client.insert_event("work@example.com", body)

    assert created == {"id": "new-1"}
    assert events.insert_kwargs == {"calendarId": "work@example.com", "body": body}


@pytest.mark.asyncio
async def test_insert_event_http_error_propagates(monkeypatch: pytest.MonkeyPatch) -> None:
    client, _ = _build_client(monkeypatch, _http_error(403))

    with pytest.raises(HttpError):
        await client.insert_event("primary", {})


@pytest.mark.asyncio
async def test_list_unexpected_error_propagates(monkeypatch: pytest.MonkeyPatch) -> None:
    client, _ = _build_client(monkeypatch, RuntimeError("socket closed"))

    with pytest.raises(RuntimeError):
        await client.list_recent_events("primary")


def test_http_status_reads_response_status() -> None:
    assert http_status(_http_error(410)) == 410
