"""Normalizer Google Calendar — converte eventos da API v3 em CalendarEvent.

Campos lidos do recurso `Event`:
- id, summary, description, start, end

start/end são mantidos como vieram (`dateTime` ou `date`, com `timeZone`
opcional) para que cópias Google → Google não reinterpretem datas.
"""

from __future__ import annotations

from typing import Any

from app.domain.calendar_event import CalendarEvent, ProviderKind


def normalize_google_event(payload: dict[str, Any]) -> CalendarEvent:
    """Normaliza um evento Google Calendar para o modelo canônico.

    Args:
        payload: Recurso `Event` retornado por events.list/events.get

    Returns:
        CalendarEvent com descrição ausente tratada como string vazia
    """
    return CalendarEvent(
        title=payload.get("summary"),
        start=dict(payload.get("start") or {}),
        end=dict(payload.get("end") or {}),
        description=payload.get("description") or "",
        source_provider=ProviderKind.GOOGLE,
        source_id=str(payload.get("id") or ""),
    )
