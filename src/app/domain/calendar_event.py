"""Modelos de dominio para replicacao de eventos entre calendarios.

O evento canonico guarda start/end na estrutura nativa do provider de origem
(chaves `dateTime`, `date`, `timeZone`) para que copias no mesmo provider
preservem o formato sem reinterpretacao de datas.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Marcador embutido na descricao/corpo de todo evento gerado pela sincronizacao.
SYNC_TAG = "[SyncedByMyApp]"


class ProviderKind(StrEnum):
    """Providers de calendario suportados."""

    GOOGLE = "google"
    OUTLOOK = "outlook"

    @classmethod
    def parse(cls, value: str | None) -> ProviderKind | None:
        """Converte texto configurado em ProviderKind; None se desconhecido."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class CalendarEvent(BaseModel):
    """Evento lido do provider de origem, imutavel apos a leitura."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str | None = Field(default=None, description="Titulo (summary/subject).")
    start: dict[str, Any] = Field(default_factory=dict, description="Inicio no formato nativo.")
    end: dict[str, Any] = Field(default_factory=dict, description="Fim no formato nativo.")
    description: str = Field(default="", description="Descricao/corpo em texto.")
    source_provider: ProviderKind = Field(..., description="Provider de onde o evento veio.")
    source_id: str = Field(default="", description="Identificador do evento na origem.")


class DestinationConfig(BaseModel):
    """Calendario de destino da replicacao."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(..., description="Nome de exibicao do destino.")
    provider: str = Field(..., description="Provider configurado (google|outlook).")
    calendar_id: str = Field(
        ...,
        alias="calendarId",
        description="ID do calendario (Google) ou usuario (Outlook).",
    )

    @property
    def provider_kind(self) -> ProviderKind | None:
        return ProviderKind.parse(self.provider)


def append_sync_tag(text: str | None) -> str:
    """Concatena o marcador ao texto, tratando ausente como vazio."""
    return f"{text or ''}\n\n{SYNC_TAG}"


__all__ = [
    "SYNC_TAG",
    "CalendarEvent",
    "DestinationConfig",
    "ProviderKind",
    "append_sync_tag",
]
