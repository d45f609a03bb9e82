"""Builders do corpo de POST /events da Microsoft Graph API.

- build_outlook_event: origem Google → destino Outlook
- build_outlook_copy: origem Outlook → destino Outlook (start/end preservados)

Referência:
https://learn.microsoft.com/graph/api/user-post-events
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.calendar_event import append_sync_tag

if TYPE_CHECKING:
    from app.domain.calendar_event import CalendarEvent

# Fuso fixo na tradução entre providers (o fuso da origem não é repassado).
OUTLOOK_TIMEZONE = "UTC"


def build_outlook_event(event: CalendarEvent) -> dict[str, Any]:
    """Constrói evento Outlook a partir de um evento Google.

    Usa `dateTime` quando existe; eventos de dia inteiro só têm `date`.
    """
    return {
        "subject": event.title,
        "start": _outlook_time(event.start),
        "end": _outlook_time(event.end),
        "body": _text_body(event.description),
    }


def build_outlook_copy(event: CalendarEvent) -> dict[str, Any]:
    """Constrói cópia Outlook → Outlook mantendo start/end como vieram."""
    return {
        "subject": event.title,
        "start": dict(event.start),
        "end": dict(event.end),
        "body": _text_body(event.description),
    }


def _outlook_time(value: dict[str, Any]) -> dict[str, Any]:
    return {
        "dateTime": value.get("dateTime") or value.get("date"),
        "timeZone": OUTLOOK_TIMEZONE,
    }


def _text_body(content: str | None) -> dict[str, str]:
    return {
        "contentType": "Text",
        "content": append_sync_tag(content),
    }
