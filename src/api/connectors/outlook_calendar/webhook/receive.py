"""Parse da notificação de mudança da Microsoft Graph (sem PII).

Formato esperado:
    {"value": [{"id": "...", "changeType": "created", ...}, ...]}

Somente a primeira entrada é considerada.
"""

from __future__ import annotations

from typing import Any


class MissingEventDataError(ValueError):
    """Notificação sem `value[0]` utilizável."""


def extract_notification_id(payload: Any) -> str:
    """Extrai `value[0].id` da notificação.

    Args:
        payload: Corpo JSON já decodificado

    Raises:
        MissingEventDataError: Se não houver entrada ou id

    Returns:
        Identificador do evento a buscar
    """
    entries = payload.get("value") if isinstance(payload, dict) else None
    if not isinstance(entries, list) or not entries:
        raise MissingEventDataError("missing_value")

    first = entries[0]
    event_id = first.get("id") if isinstance(first, dict) else None
    if not isinstance(event_id, str) or not event_id.strip():
        raise MissingEventDataError("missing_event_id")
    return event_id
