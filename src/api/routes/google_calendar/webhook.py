"""Endpoint de webhook do Google Calendar.

Endpoints:
- POST /webhook/google: push notification do calendário observado

O corpo não é usado: o handler busca o evento mais recente por conta própria.
Respostas: 200 "OK" / 500 "Error".
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Request, Response

from api.routes.responses import ok, server_error
from app.observability import correlation_scope, get_correlation_id, record_latency

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=None)
async def receive_google_webhook(request: Request) -> Response:
    """Processa a notificação e replica o evento mais recente."""
    with correlation_scope(request.headers.get("x-correlation-id")):
        handler = getattr(request.app.state, "google_handler", None)
        if handler is None:
            logger.error(
                "webhook_handler_unavailable",
                extra={"channel": "google", "correlation_id": get_correlation_id()},
            )
            return server_error()

        logger.info(
            "webhook_received",
            extra={
                "channel": "google",
                "resource_state": request.headers.get("x-goog-resource-state"),
                "correlation_id": get_correlation_id(),
            },
        )
        started_at = time.perf_counter()
        try:
            result = await handler.handle()
        except Exception:
            logger.exception(
                "google_webhook_failed",
                extra={"channel": "google", "correlation_id": get_correlation_id()},
            )
            return server_error()
        finally:
            record_latency(
                "google_webhook",
                "handle",
                (time.perf_counter() - started_at) * 1000,
                get_correlation_id(),
            )

        if result is not None and result.has_failures:
            logger.warning(
                "webhook_sync_partial_failure",
                extra={
                    "channel": "google",
                    "failed_destinations": [o.destination for o in result.failed],
                    "correlation_id": get_correlation_id(),
                },
            )
            return server_error()
        return ok()
