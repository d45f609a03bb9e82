"""Endpoints de webhook do Outlook Calendar (Microsoft Graph).

Endpoints:
- GET /webhook/outlook: handshake de validação (ecoa validationToken)
- POST /webhook/outlook: notificação de mudança `{value: [{id, ...}]}`

A Graph também envia o handshake como POST com `?validationToken=`; nesse
caso o token é ecoado da mesma forma.

Respostas POST: 200 "OK" / 400 "No event data" / 500 "Error".
"""

from __future__ import annotations

import json
import logging
import time

from fastapi import APIRouter, Request, Response, status

from api.connectors.outlook_calendar.webhook import (
    MissingEventDataError,
    MissingValidationTokenError,
    extract_notification_id,
    verify_validation_token,
)
from api.routes.responses import ok, plain_text, server_error
from app.observability import correlation_scope, get_correlation_id, record_latency

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=None)
async def verify_subscription(request: Request) -> Response:
    """Handshake de validação da subscription.

    Query params esperados:
    - validationToken: valor a ecoar como texto puro

    Returns:
        Token (200) ou "Missing validationToken" (400).
    """
    try:
        token = verify_validation_token(request.query_params.get("validationToken"))
    except MissingValidationTokenError as exc:
        logger.warning(
            "webhook_verification_failed",
            extra={"channel": "outlook", "error": str(exc)},
        )
        return Response(
            content="Missing validationToken",
            media_type="text/plain",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    logger.info("webhook_verified", extra={"channel": "outlook"})
    return Response(content=token, media_type="text/plain", status_code=status.HTTP_200_OK)


@router.post("", response_model=None)
async def receive_outlook_webhook(request: Request) -> Response:
    """Processa a notificação de mudança e replica o evento."""
    if "validationToken" in request.query_params:
        return await verify_subscription(request)

    with correlation_scope(request.headers.get("x-correlation-id")):
        raw_body = await request.body()
        try:
            event_id = extract_notification_id(_decode_json(raw_body))
        except MissingEventDataError as exc:
            logger.warning(
                "webhook_event_data_missing",
                extra={
                    "channel": "outlook",
                    "error": str(exc),
                    "payload_size": len(raw_body),
                    "correlation_id": get_correlation_id(),
                },
            )
            return plain_text("No event data", status.HTTP_400_BAD_REQUEST)

        handler = getattr(request.app.state, "outlook_handler", None)
        if handler is None:
            logger.error(
                "webhook_handler_unavailable",
                extra={"channel": "outlook", "correlation_id": get_correlation_id()},
            )
            return server_error()

        logger.info(
            "webhook_received",
            extra={
                "channel": "outlook",
                "payload_size": len(raw_body),
                "correlation_id": get_correlation_id(),
            },
        )
        started_at = time.perf_counter()
        try:
            result = await handler.handle(event_id)
        except Exception:
            logger.exception(
                "outlook_webhook_failed",
                extra={"channel": "outlook", "correlation_id": get_correlation_id()},
            )
            return server_error()
        finally:
            record_latency(
                "outlook_webhook",
                "handle",
                (time.perf_counter() - started_at) * 1000,
                get_correlation_id(),
            )

        if result is not None and result.has_failures:
            logger.warning(
                "webhook_sync_partial_failure",
                extra={
                    "channel": "outlook",
                    "failed_destinations": [o.destination for o in result.failed],
                    "correlation_id": get_correlation_id(),
                },
            )
            return server_error()
        return ok()


def _decode_json(raw_body: bytes) -> object:
    try:
        return json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MissingEventDataError("invalid_json") from exc
