"""Respostas em texto puro usadas pelos webhooks de calendário."""

from __future__ import annotations

from fastapi import Response, status

from app.observability import get_correlation_id

OK_TEXT = "OK"
ERROR_TEXT = "Error"


def plain_text(content: str, status_code: int = status.HTTP_200_OK) -> Response:
    """Resposta text/plain com o correlation_id no header."""
    return Response(
        content=content,
        media_type="text/plain",
        status_code=status_code,
        headers={"x-correlation-id": get_correlation_id()},
    )


def ok() -> Response:
    return plain_text(OK_TEXT)


def server_error() -> Response:
    return plain_text(ERROR_TEXT, status.HTTP_500_INTERNAL_SERVER_ERROR)
