"""Settings específicas de Google Calendar.

Credenciais OAuth 2.0 de usuário (access + refresh token) já emitidas;
o fluxo de consentimento não faz parte deste serviço.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Google Calendar API
GOOGLE_CALENDAR_API_VERSION: str = "v3"
GOOGLE_TOKEN_URI: str = "https://oauth2.googleapis.com/token"


@dataclass(frozen=True)
class GoogleCalendarSettings:
    """Configurações do provider Google Calendar.

    Attributes:
        client_id: Client ID do app Google
        client_secret: Client Secret do app Google
        redirect_uri: Redirect URI registrada no app
        access_token: Token de acesso OAuth 2.0
        refresh_token: Refresh Token OAuth 2.0
        token_uri: Endpoint de renovação de token
        calendar_id: Calendário observado pelo webhook (geralmente 'primary')
    """

    # Credenciais OAuth
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    access_token: str = ""
    refresh_token: str = ""
    token_uri: str = GOOGLE_TOKEN_URI

    # Calendário
    calendar_id: str = "primary"

    @property
    def is_configured(self) -> bool:
        """Retorna True se há alguma credencial para autenticar."""
        return bool(self.access_token or self.refresh_token)

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Google Calendar."""
        errors: list[str] = []
        if not self.is_configured:
            errors.append("GOOGLE_ACCESS_TOKEN ou GOOGLE_REFRESH_TOKEN não configurado")
        if self.refresh_token and not (self.client_id and self.client_secret):
            errors.append(
                "GOOGLE_CLIENT_ID e GOOGLE_CLIENT_SECRET são obrigatórios com refresh token"
            )
        return errors


def _load_from_env() -> GoogleCalendarSettings:
    """Carrega GoogleCalendarSettings de variáveis de ambiente."""
    return GoogleCalendarSettings(
        client_id=os.getenv("GOOGLE_CLIENT_ID", ""),
        client_secret=os.getenv("GOOGLE_CLIENT_SECRET", ""),
        redirect_uri=os.getenv("GOOGLE_REDIRECT_URI", ""),
        access_token=os.getenv("GOOGLE_ACCESS_TOKEN", ""),
        refresh_token=os.getenv("GOOGLE_REFRESH_TOKEN", ""),
        token_uri=os.getenv("GOOGLE_TOKEN_URI", GOOGLE_TOKEN_URI),
        calendar_id=os.getenv("GOOGLE_CALENDAR_ID", "primary"),
    )


@lru_cache(maxsize=1)
def get_google_calendar_settings() -> GoogleCalendarSettings:
    """Retorna instância cacheada de GoogleCalendarSettings."""
    return _load_from_env()


__all__ = [
    "GOOGLE_CALENDAR_API_VERSION",
    "GoogleCalendarSettings",
    "get_google_calendar_settings",
]
