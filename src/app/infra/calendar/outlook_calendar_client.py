"""Client concreto de Outlook Calendar via Microsoft Graph.

Endpoints usados (Graph v1.0):
- GET  /me/events/{id}
- POST /users/{id}/events  (ou /me/events quando o destino é "me")

O access token é recebido pronto; renovação fica fora deste client.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.observability import get_correlation_id
from app.protocols.calendar_provider import OutlookCalendarProviderProtocol

if TYPE_CHECKING:
    import httpx

    from config.settings import OutlookCalendarSettings

logger = logging.getLogger(__name__)

_COMPONENT = "outlook_calendar_client"
_CURRENT_USER = "me"


class OutlookApiError(HttpError):
    """Erro retornado pela Microsoft Graph (status >= 400)."""

    def __init__(self, message: str, status_code: int | None = None, code: str = "") -> None:
        super().__init__(message, status_code=status_code, is_retryable=False)
        self.code = code


class OutlookCalendarClient(HttpClient, OutlookCalendarProviderProtocol):
    """Implementação do protocolo de calendário Outlook sobre httpx."""

    def __init__(
        self,
        *,
        access_token: str,
        base_url: str = "https://graph.microsoft.com/v1.0",
        config: HttpClientConfig | None = None,
    ) -> None:
        if not access_token or not access_token.strip():
            raise ValueError(
                "access_token é obrigatório para o Microsoft Graph. "
                "Verifique se MS_ACCESS_TOKEN está configurado."
            )
        super().__init__(config)
        self._access_token = access_token
        self._base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: OutlookCalendarSettings) -> OutlookCalendarClient:
        return cls(
            access_token=settings.access_token,
            base_url=settings.graph_base_url,
            config=HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                max_retries=settings.max_retries,
            ),
        )

    async def get_event(self, event_id: str) -> dict[str, Any]:
        url = f"{self._base_url}/me/events/{quote(event_id, safe='')}"
        return await self._send("get_event", "GET", url)

    async def create_event(self, user_or_calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
        url = f"{self._base_url}/{_events_path(user_or_calendar_id)}"
        return await self._send("create_event", "POST", url, body)

    async def _send(
        self,
        action: str,
        method: str,
        url: str,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._access_token}",
        }
        try:
            if method == "POST":
                response = await self.post(url, json=body or {}, headers=headers)
            else:
                response = await self.get(url, headers=headers)
        except HttpError as exc:
            self._log_error(action=action, exc=exc)
            raise
        return self._process_response(action, response)

    def _process_response(self, action: str, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json() if response.content else {}
        except json.JSONDecodeError as exc:
            logger.error(
                "outlook_response_invalid_json",
                extra={"component": _COMPONENT, "action": action},
            )
            raise OutlookApiError("invalid_json", status_code=response.status_code) from exc

        if response.status_code >= 400:
            error = parse_graph_error(data, response.status_code)
            self._log_error(action=action, exc=error)
            raise error

        logger.debug(
            "outlook_request_ok",
            extra={
                "component": _COMPONENT,
                "action": action,
                "status_code": response.status_code,
            },
        )
        return data if isinstance(data, dict) else {}

    def _log_error(self, *, action: str, exc: HttpError) -> None:
        logger.error(
            "outlook_calendar_http_error",
            extra={
                "component": _COMPONENT,
                "action": action,
                "result": "error",
                "status_code": exc.status_code,
                "error_type": type(exc).__name__,
                "correlation_id": get_correlation_id(),
            },
        )


def parse_graph_error(data: Any, status_code: int) -> OutlookApiError:
    """Extrai `error.code`/`error.message` do corpo de erro da Graph."""
    error_obj = data.get("error") if isinstance(data, dict) else None
    if not isinstance(error_obj, dict):
        return OutlookApiError("graph_error", status_code=status_code)
    return OutlookApiError(
        str(error_obj.get("message") or "graph_error"),
        status_code=status_code,
        code=str(error_obj.get("code") or ""),
    )


def _events_path(user_or_calendar_id: str) -> str:
    if not user_or_calendar_id or user_or_calendar_id == _CURRENT_USER:
        return "me/events"
    return f"users/{quote(user_or_calendar_id, safe='@')}/events"
