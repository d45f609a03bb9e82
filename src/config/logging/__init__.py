"""Logging estruturado JSON do calendar-relay.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap/)
    configure_logging(level="INFO", service_name="calendar_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("sync_fanout_completed", extra={"succeeded": 3})

Campos obrigatórios em todo log: correlation_id, service, environment,
level, logger, message, asctime. Corpo de evento (título, descrição) nunca vai para o log.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
