"""Fakes in-memory dos clients de calendário para testes deterministas."""

from __future__ import annotations

from typing import Any


class FakeGoogleCalendarClient:
    """Registra inserções e devolve eventos pré-definidos na listagem."""

    def __init__(
        self,
        recent_events: list[dict[str, Any]] | None = None,
        *,
        fail_on_insert: Exception | None = None,
    ) -> None:
        self._recent_events = recent_events or []
        self._fail_on_insert = fail_on_insert
        self.list_calls: list[dict[str, Any]] = []
        self.inserted: list[tuple[str, dict[str, Any]]] = []

    async def list_recent_events(
        self,
        calendar_id: str,
        *,
        time_min: str | None = None,
        max_results: int = 1,
        single_events: bool = True,
        order_by: str = "updated",
    ) -> list[dict[str, Any]]:
        self.list_calls.append(
            {
                "calendar_id": calendar_id,
                "time_min": time_min,
                "max_results": max_results,
                "single_events": single_events,
                "order_by": order_by,
            }
        )
        return [dict(event) for event in self._recent_events[:max_results]]

    async def insert_event(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
        if self._fail_on_insert is not None:
            raise self._fail_on_insert
        self.inserted.append((calendar_id, body))
        return {"id": f"g-{len(self.inserted)}", **body}


class FakeOutlookCalendarClient:
    """Devolve eventos por id e registra criações."""

    def __init__(
        self,
        events: dict[str, dict[str, Any]] | None = None,
        *,
        fail_on_create: Exception | None = None,
    ) -> None:
        self._events = events or {}
        self._fail_on_create = fail_on_create
        self.fetched: list[str] = []
        self.created: list[tuple[str, dict[str, Any]]] = []

    async def get_event(self, event_id: str) -> dict[str, Any]:
        self.fetched.append(event_id)
        if event_id not in self._events:
            raise LookupError(event_id)
        return dict(self._events[event_id])

    async def create_event(self, user_or_calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
        if self._fail_on_create is not None:
            raise self._fail_on_create
        self.created.append((user_or_calendar_id, body))
        return {"id": f"o-{len(self.created)}", **body}
