"""Normalizer Outlook Calendar — converte eventos Microsoft Graph em CalendarEvent.

Campos lidos do recurso `event` (Graph v1.0):
- id, subject, body.content, start, end
"""

from __future__ import annotations

from typing import Any

from app.domain.calendar_event import CalendarEvent, ProviderKind


def normalize_outlook_event(payload: dict[str, Any]) -> CalendarEvent:
    """Normaliza um evento Outlook para o modelo canônico."""
    body = payload.get("body")
    content = body.get("content") if isinstance(body, dict) else None
    return CalendarEvent(
        title=payload.get("subject"),
        start=dict(payload.get("start") or {}),
        end=dict(payload.get("end") or {}),
        description=content or "",
        source_provider=ProviderKind.OUTLOOK,
        source_id=str(payload.get("id") or ""),
    )
