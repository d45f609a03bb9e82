"""Testes para config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
create_json_formatter.
"""

from __future__ import annotations

import io
import json
import logging

import pytest

from app.observability import correlation_scope, get_correlation_id
from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, QUIET_LOGGERS


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize("level", ["DEBUG", "info", "WARNING", "ERROR", "CRITICAL"])
    def test_sets_root_level(self, level: str) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == getattr(logging, level.upper())

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_quiets_noisy_libraries(self) -> None:
        configure_logging(level="DEBUG")
        for name, level in QUIET_LOGGERS.items():
            assert logging.getLogger(name).level == getattr(logging, level)

    def test_emits_json_with_correlation_id(self) -> None:
        stream = io.StringIO()
        configure_logging(
            level="INFO",
            service_name="calendar_relay_test",
            correlation_id_getter=get_correlation_id,
            stream=stream,
            environment="staging",
        )

        with correlation_scope("corr-1"):
            get_logger("tests.logging").info("sync_fanout_completed", extra={"succeeded": 2})

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["message"] == "sync_fanout_completed"
        assert record["correlation_id"] == "corr-1"
        assert record["service"] == "calendar_relay_test"
        assert record["environment"] == "staging"
        assert record["level"] == "INFO"
        assert record["logger"] == "tests.logging"
        assert record["succeeded"] == 2


class TestCorrelationIdFilter:
    def _record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_uses_getter_when_missing(self) -> None:
        record = self._record()
        assert CorrelationIdFilter("svc", lambda: "from-context").filter(record)
        assert record.correlation_id == "from-context"
        assert record.service == "svc"
        assert record.environment == "development"

    def test_explicit_value_takes_precedence(self) -> None:
        record = self._record(correlation_id="explicit")
        CorrelationIdFilter("svc", lambda: "from-context").filter(record)
        assert record.correlation_id == "explicit"

    def test_without_getter_defaults_to_empty(self) -> None:
        record = self._record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestFormatter:
    def test_required_fields_and_renames(self) -> None:
        assert "correlation_id" in REQUIRED_LOG_FIELDS
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}
        assert create_json_formatter() is not None

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "calendar_relay"
