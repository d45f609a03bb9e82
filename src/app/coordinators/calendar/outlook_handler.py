"""Notificação do Outlook Calendar: busca por id, guard e fan-out."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.normalizers.outlook_calendar import normalize_outlook_event
from app.domain.calendar_event import ProviderKind
from app.observability import get_correlation_id, record_loop_skip
from app.services.loop_guard import is_synced

if TYPE_CHECKING:
    from app.domain.sync_result import DispatchResult
    from app.protocols.calendar_provider import OutlookCalendarProviderProtocol
    from app.services.fanout_dispatcher import FanoutDispatcher

logger = logging.getLogger(__name__)


class OutlookWebhookHandler:
    """fetch(event_id) → guard → dispatch."""

    def __init__(
        self,
        *,
        client: OutlookCalendarProviderProtocol,
        dispatcher: FanoutDispatcher,
    ) -> None:
        self._client = client
        self._dispatcher = dispatcher

    async def handle(self, event_id: str) -> DispatchResult | None:
        """Busca o evento notificado e replica se ainda não foi sincronizado.

        Args:
            event_id: Identificador extraído de `value[0].id`

        Returns:
            DispatchResult se houve fan-out; None se o evento já tinha o marcador.
        """
        payload = await self._client.get_event(event_id)
        event = normalize_outlook_event(payload)
        if is_synced(event.description):
            logger.info(
                "outlook_webhook_already_synced",
                extra={"source_id": event.source_id, "correlation_id": get_correlation_id()},
            )
            record_loop_skip(str(ProviderKind.OUTLOOK), get_correlation_id())
            return None

        return await self._dispatcher.dispatch(event, ProviderKind.OUTLOOK)
