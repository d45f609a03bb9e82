"""Notificação do Google Calendar: busca, guard e fan-out.

O push do Google não traz o evento; o handler consulta o evento mais
recentemente atualizado do calendário observado.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from api.normalizers.google_calendar import normalize_google_event
from app.domain.calendar_event import ProviderKind
from app.observability import get_correlation_id, record_loop_skip
from app.services.loop_guard import is_synced

if TYPE_CHECKING:
    from app.domain.sync_result import DispatchResult
    from app.protocols.calendar_provider import GoogleCalendarProviderProtocol
    from app.services.fanout_dispatcher import FanoutDispatcher

logger = logging.getLogger(__name__)


class GoogleWebhookHandler:
    """receive → fetch-latest → guard → dispatch."""

    def __init__(
        self,
        *,
        client: GoogleCalendarProviderProtocol,
        dispatcher: FanoutDispatcher,
        calendar_id: str = "primary",
    ) -> None:
        self._client = client
        self._dispatcher = dispatcher
        self._calendar_id = calendar_id

    async def handle(self) -> DispatchResult | None:
        """Processa uma notificação.

        Returns:
            DispatchResult se houve fan-out; None quando não havia evento ou
            o evento já era fruto de sincronização.

        Raises:
            Exception: Falhas do provider na busca propagam para a rota.
        """
        items = await self._client.list_recent_events(
            self._calendar_id,
            time_min=datetime.now(UTC).isoformat(),
            max_results=1,
            single_events=True,
            order_by="updated",
        )
        if not items:
            logger.info(
                "google_webhook_no_event",
                extra={"calendar_id": self._calendar_id, "correlation_id": get_correlation_id()},
            )
            return None

        event = normalize_google_event(items[0])
        if is_synced(event.description):
            logger.info(
                "google_webhook_already_synced",
                extra={"source_id": event.source_id, "correlation_id": get_correlation_id()},
            )
            record_loop_skip(str(ProviderKind.GOOGLE), get_correlation_id())
            return None

        return await self._dispatcher.dispatch(event, ProviderKind.GOOGLE)
