"""Builders do corpo de events.insert da Google Calendar API.

- build_google_event: origem Outlook → destino Google
- build_google_copy: origem Google → destino Google (start/end preservados)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.calendar_event import append_sync_tag

if TYPE_CHECKING:
    from app.domain.calendar_event import CalendarEvent


def build_google_event(event: CalendarEvent) -> dict[str, Any]:
    """Constrói evento Google a partir de um evento Outlook.

    Graph retorna `dateTime` sem offset; o `timeZone` da origem é repassado
    quando presente porque a API do Google exige um dos dois.
    """
    return {
        "summary": event.title,
        "start": _google_time(event.start),
        "end": _google_time(event.end),
        "description": append_sync_tag(event.description),
    }


def build_google_copy(event: CalendarEvent) -> dict[str, Any]:
    """Constrói cópia Google → Google mantendo start/end como vieram."""
    return {
        "summary": event.title,
        "start": dict(event.start),
        "end": dict(event.end),
        "description": append_sync_tag(event.description),
    }


def _google_time(value: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {"dateTime": value.get("dateTime")}
    if value.get("timeZone"):
        result["timeZone"] = value["timeZone"]
    return result
