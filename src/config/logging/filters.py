"""Filter de logging que injeta o contexto do serviço em cada record.

Campos injetados:
- correlation_id: notificação de webhook em processamento
- service: nome do serviço
- environment: development|staging|production
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Enriquece cada record; nunca filtra.

    correlation_id passado explicitamente via `extra` tem precedência sobre
    o valor do contexto.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
        environment: str = "development",
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._environment = environment
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        explicit = getattr(record, "correlation_id", None)
        record.correlation_id = explicit or self._get_correlation_id()
        record.service = self._service_name
        record.environment = self._environment
        return True
