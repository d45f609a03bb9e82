"""Endpoints de health check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "calendar-relay"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: clients inicializados e destinos carregados.

    Basta um provider de origem pronto para o serviço receber notificações.
    """
    state = request.app.state
    google_check = _check_client(getattr(state, "google_client", None))
    outlook_check = _check_client(getattr(state, "outlook_client", None))
    registry = getattr(state, "destination_registry", None)
    destinations = len(registry) if registry is not None else 0

    ready = destinations > 0 and "ok" in (google_check.status, outlook_check.status)
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "google": google_check.as_dict(),
            "outlook": outlook_check.as_dict(),
        },
        "destinations": destinations,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    if not ready:
        logger.warning("readiness_check_failed", extra={"destinations": destinations})
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_client(client: Any | None) -> DependencyCheck:
    if client is None:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")
