"""Contratos dos clients de calendário consumidos pela sincronização.

Os clients são criados uma vez no startup, já autenticados; renovação de
token fica a cargo de cada implementação.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class GoogleCalendarProviderProtocol(Protocol):
    """Operações de Google Calendar usadas pela sincronização."""

    async def list_recent_events(
        self,
        calendar_id: str,
        *,
        time_min: str | None = None,
        max_results: int = 1,
        single_events: bool = True,
        order_by: str = "updated",
    ) -> list[dict[str, Any]]:
        """Lista eventos do calendário ordenados por atualização."""
        ...

    async def insert_event(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
        """Cria evento no calendário e retorna o recurso criado."""
        ...


@runtime_checkable
class OutlookCalendarProviderProtocol(Protocol):
    """Operações de Outlook Calendar (Microsoft Graph) usadas pela sincronização."""

    async def get_event(self, event_id: str) -> dict[str, Any]:
        """Busca evento completo pelo identificador."""
        ...

    async def create_event(self, user_or_calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
        """Cria evento para o usuário/calendário e retorna o recurso criado."""
        ...
