"""Formatter JSON com campos padronizados.

Exemplo de output:
    {"asctime": "2026-10-19 10:30:00,000", "level": "INFO",
     "logger": "app.services.fanout_dispatcher", "message": "sync_fanout_completed",
     "correlation_id": "abc-123", "service": "calendar_relay",
     "environment": "production", "succeeded": 3}
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
    "environment",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com REQUIRED_LOG_FIELDS e nomes padronizados."""
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
