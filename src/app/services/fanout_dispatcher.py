"""Fan-out de um evento de origem para todos os destinos configurados.

Cada destino é independente: falha em um destino é registrada no resultado
e o envio continua para os demais. Não há retentativa aqui; o payload é
reconstruído para cada destino.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from app.domain.calendar_event import ProviderKind
from app.domain.sync_result import DispatchOutcome, DispatchResult
from app.observability import get_correlation_id, record_latency, record_sync_outcome
from app.services.event_translator import select_translator

if TYPE_CHECKING:
    from app.domain.calendar_event import CalendarEvent, DestinationConfig
    from app.protocols.calendar_provider import (
        GoogleCalendarProviderProtocol,
        OutlookCalendarProviderProtocol,
    )
    from app.services.destination_registry import DestinationRegistry

logger = logging.getLogger(__name__)

_COMPONENT = "fanout_dispatcher"


class FanoutDispatcher:
    """Replica um evento em todos os destinos do registry, em ordem."""

    def __init__(
        self,
        *,
        registry: DestinationRegistry,
        google_client: GoogleCalendarProviderProtocol | None = None,
        outlook_client: OutlookCalendarProviderProtocol | None = None,
    ) -> None:
        self._registry = registry
        self._google_client = google_client
        self._outlook_client = outlook_client

    async def dispatch(
        self,
        source_event: CalendarEvent,
        source_kind: ProviderKind,
    ) -> DispatchResult:
        """Envia uma cópia do evento para cada destino.

        Args:
            source_event: Evento canônico lido da origem
            source_kind: Provider de onde o evento veio

        Returns:
            DispatchResult com um outcome por destino, na ordem do registry
        """
        outcomes = [
            await self._dispatch_one(source_event, source_kind, destination)
            for destination in self._registry
        ]
        result = DispatchResult(outcomes=tuple(outcomes))
        logger.info(
            "sync_fanout_completed",
            extra={
                "component": _COMPONENT,
                "source_provider": str(source_kind),
                "destinations": len(result.outcomes),
                "succeeded": len(result.succeeded),
                "failed": len(result.failed),
                "correlation_id": get_correlation_id(),
            },
        )
        return result

    async def _dispatch_one(
        self,
        source_event: CalendarEvent,
        source_kind: ProviderKind,
        destination: DestinationConfig,
    ) -> DispatchOutcome:
        kind = destination.provider_kind
        if kind is None:
            return self._config_error(source_kind, destination, "unrecognized_provider")

        payload = select_translator(source_kind, kind)(source_event)
        started_at = time.perf_counter()
        try:
            created = await self._submit(kind, destination.calendar_id, payload)
        except _ClientNotConfiguredError:
            return self._config_error(source_kind, destination, "provider_client_not_configured")
        except Exception as exc:
            logger.exception(
                "sync_destination_failed",
                extra={
                    "component": _COMPONENT,
                    "destination": destination.name,
                    "provider": str(kind),
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )
            record_sync_outcome(str(source_kind), str(kind), "failed", get_correlation_id())
            return DispatchOutcome(
                destination=destination.name,
                status="failed",
                error=type(exc).__name__,
            )

        record_latency(
            _COMPONENT,
            f"submit_{kind}",
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
        )
        record_sync_outcome(str(source_kind), str(kind), "success", get_correlation_id())
        created_id = created.get("id") if isinstance(created, dict) else None
        return DispatchOutcome(
            destination=destination.name,
            status="success",
            created_id=str(created_id) if created_id else None,
        )

    async def _submit(
        self,
        kind: ProviderKind,
        calendar_id: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        # Sempre o client do provider do destino, nunca o da origem.
        match kind:
            case ProviderKind.GOOGLE:
                if self._google_client is None:
                    raise _ClientNotConfiguredError
                return await self._google_client.insert_event(calendar_id, payload)
            case ProviderKind.OUTLOOK:
                if self._outlook_client is None:
                    raise _ClientNotConfiguredError
                return await self._outlook_client.create_event(calendar_id, payload)

    def _config_error(
        self,
        source_kind: ProviderKind,
        destination: DestinationConfig,
        reason: str,
    ) -> DispatchOutcome:
        logger.error(
            "sync_destination_config_error",
            extra={
                "component": _COMPONENT,
                "destination": destination.name,
                "provider": destination.provider,
                "reason": reason,
                "correlation_id": get_correlation_id(),
            },
        )
        record_sync_outcome(
            str(source_kind),
            destination.provider,
            "config_error",
            get_correlation_id(),
        )
        return DispatchOutcome(destination=destination.name, status="config_error", error=reason)


class _ClientNotConfiguredError(RuntimeError):
    """Destino aponta para um provider sem client inicializado."""
