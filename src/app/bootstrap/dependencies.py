"""Wiring dos componentes de sincronização.

Monta registry, dispatcher e handlers a partir das settings e dos clients.
Handler de um provider sem client fica None; a rota responde 500.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.bootstrap.clients import (
    create_google_calendar_client,
    create_outlook_calendar_client,
)
from app.coordinators.calendar import GoogleWebhookHandler, OutlookWebhookHandler
from app.services.destination_registry import DestinationRegistry
from app.services.fanout_dispatcher import FanoutDispatcher
from config.settings import (
    get_google_calendar_settings,
    get_outlook_calendar_settings,
    get_sync_settings,
)

if TYPE_CHECKING:
    from app.protocols.calendar_provider import (
        GoogleCalendarProviderProtocol,
        OutlookCalendarProviderProtocol,
    )


@dataclass(frozen=True, slots=True)
class SyncComponents:
    """Componentes de processo, criados uma vez no startup."""

    registry: DestinationRegistry
    dispatcher: FanoutDispatcher
    google_client: GoogleCalendarProviderProtocol | None
    outlook_client: OutlookCalendarProviderProtocol | None
    google_handler: GoogleWebhookHandler | None
    outlook_handler: OutlookWebhookHandler | None


def build_sync_components(
    *,
    registry: DestinationRegistry,
    google_client: GoogleCalendarProviderProtocol | None,
    outlook_client: OutlookCalendarProviderProtocol | None,
    google_calendar_id: str = "primary",
) -> SyncComponents:
    """Conecta clients, registry, dispatcher e handlers."""
    dispatcher = FanoutDispatcher(
        registry=registry,
        google_client=google_client,
        outlook_client=outlook_client,
    )
    google_handler = (
        GoogleWebhookHandler(
            client=google_client,
            dispatcher=dispatcher,
            calendar_id=google_calendar_id,
        )
        if google_client is not None
        else None
    )
    outlook_handler = (
        OutlookWebhookHandler(client=outlook_client, dispatcher=dispatcher)
        if outlook_client is not None
        else None
    )
    return SyncComponents(
        registry=registry,
        dispatcher=dispatcher,
        google_client=google_client,
        outlook_client=outlook_client,
        google_handler=google_handler,
        outlook_handler=outlook_handler,
    )


def create_sync_components() -> SyncComponents:
    """Cria os componentes a partir das variáveis de ambiente."""
    google_settings = get_google_calendar_settings()
    return build_sync_components(
        registry=DestinationRegistry.from_settings(get_sync_settings()),
        google_client=create_google_calendar_client(google_settings),
        outlook_client=create_outlook_calendar_client(get_outlook_calendar_settings()),
        google_calendar_id=google_settings.calendar_id,
    )
