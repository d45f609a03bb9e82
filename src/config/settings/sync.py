"""Settings da sincronização: lista de calendários de destino.

SYNC_DESTINATIONS recebe uma lista JSON no formato
`[{"name": "...", "provider": "google|outlook", "calendarId": "..."}]`.
Sem a variável, vale DEFAULT_DESTINATIONS.
"""

from __future__ import annotations

import json
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.domain.calendar_event import DestinationConfig

DEFAULT_DESTINATIONS: tuple[DestinationConfig, ...] = (
    DestinationConfig(name="Work Google", provider="google", calendar_id="work@example.com"),
    DestinationConfig(name="Personal Google", provider="google", calendar_id="primary"),
    DestinationConfig(name="Personal Outlook", provider="outlook", calendar_id="me"),
)


class SyncSettings(BaseModel):
    """Configurações da replicação de eventos."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    destinations: tuple[DestinationConfig, ...] = Field(
        default=DEFAULT_DESTINATIONS,
        description="Destinos na ordem de envio.",
    )


def parse_destinations(raw: str) -> tuple[DestinationConfig, ...]:
    """Converte o JSON de SYNC_DESTINATIONS em destinos.

    Raises:
        ValueError: Se o JSON for inválido ou algum item não tiver os campos.
    """
    try:
        items = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError("SYNC_DESTINATIONS não é JSON válido") from exc
    if not isinstance(items, list):
        raise ValueError("SYNC_DESTINATIONS deve ser uma lista")
    try:
        return tuple(DestinationConfig.model_validate(item) for item in items)
    except ValidationError as exc:
        raise ValueError(f"SYNC_DESTINATIONS inválido: {exc.error_count()} erro(s)") from exc


def _load_sync_from_env() -> SyncSettings:
    """Carrega SyncSettings de variáveis de ambiente."""
    raw = os.getenv("SYNC_DESTINATIONS", "").strip()
    if not raw:
        return SyncSettings()
    return SyncSettings(destinations=parse_destinations(raw))


@lru_cache(maxsize=1)
def get_sync_settings() -> SyncSettings:
    """Retorna instância cacheada de SyncSettings."""
    return _load_sync_from_env()


__all__ = [
    "DEFAULT_DESTINATIONS",
    "SyncSettings",
    "get_sync_settings",
    "parse_destinations",
]
