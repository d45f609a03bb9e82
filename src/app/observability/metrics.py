"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas depois pelo
backend de logs (Cloud Logging, CloudWatch Insights, etc.).

Métricas suportadas:
- Latência: tempo de envio por destino / por notificação
- Sync outcome: counter de resultados do fan-out por destino
- Loop skip: counter de eventos ignorados por já estarem sincronizados
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "fanout_dispatcher")
        operation: Nome da operação (ex: "submit", "google_webhook")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_sync_outcome(
    source_provider: str,
    destination_provider: str,
    status: str,
    correlation_id: str | None = None,
) -> None:
    """Registra o resultado do envio para um destino.

    Args:
        source_provider: Provider de origem (google|outlook)
        destination_provider: Provider configurado no destino
        status: success|failed|config_error
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_sync_outcome",
        extra={
            "metric_type": "sync_outcome",
            "source_provider": source_provider,
            "destination_provider": destination_provider,
            "status": status,
            "correlation_id": correlation_id,
        },
    )


def record_loop_skip(source_provider: str, correlation_id: str | None = None) -> None:
    """Registra evento ignorado por conter o marcador de sincronização."""
    logger.info(
        "metric_loop_skip",
        extra={
            "metric_type": "loop_skip",
            "source_provider": source_provider,
            "correlation_id": correlation_id,
        },
    )
