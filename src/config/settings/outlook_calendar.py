"""Settings específicas de Outlook Calendar (Microsoft Graph)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

GRAPH_API_BASE_URL: str = "https://graph.microsoft.com/v1.0"


@dataclass(frozen=True)
class OutlookCalendarSettings:
    """Configurações do provider Outlook Calendar.

    Attributes:
        access_token: Bearer token da Microsoft Graph
        graph_base_url: URL base da Graph com versão
        request_timeout_seconds: Timeout por requisição HTTP
        max_retries: Retentativas em 429/5xx (0 = reportar sem repetir)
    """

    access_token: str = ""
    graph_base_url: str = GRAPH_API_BASE_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 0

    @property
    def is_configured(self) -> bool:
        """Retorna True se há token para autenticar."""
        return bool(self.access_token.strip())

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Outlook Calendar."""
        errors: list[str] = []
        if not self.is_configured:
            errors.append("MS_ACCESS_TOKEN não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("OUTLOOK_REQUEST_TIMEOUT_SECONDS deve ser positivo")
        if self.max_retries < 0:
            errors.append("OUTLOOK_MAX_RETRIES não pode ser negativo")
        return errors


def _load_from_env() -> OutlookCalendarSettings:
    """Carrega OutlookCalendarSettings de variáveis de ambiente."""
    return OutlookCalendarSettings(
        access_token=os.getenv("MS_ACCESS_TOKEN", ""),
        graph_base_url=os.getenv("MS_GRAPH_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("OUTLOOK_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("OUTLOOK_MAX_RETRIES", "0")),
    )


@lru_cache(maxsize=1)
def get_outlook_calendar_settings() -> OutlookCalendarSettings:
    """Retorna instância cacheada de OutlookCalendarSettings."""
    return _load_from_env()


__all__ = [
    "GRAPH_API_BASE_URL",
    "OutlookCalendarSettings",
    "get_outlook_calendar_settings",
]
