"""Client concreto de Google Calendar para a sincronização de eventos."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.observability import get_correlation_id
from app.protocols.calendar_provider import GoogleCalendarProviderProtocol

if TYPE_CHECKING:
    from config.settings import GoogleCalendarSettings

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_client"
_CALENDAR_SCOPE = "https://www.googleapis.com/auth/calendar"


class GoogleCalendarClient(GoogleCalendarProviderProtocol):
    """Implementação do protocolo de calendário usando a API v3 do Google.

    A renovação do access token é feita pelo próprio google-auth a partir do
    refresh token configurado.
    """

    __slots__ = ("_service",)

    def __init__(self, *, settings: GoogleCalendarSettings) -> None:
        credentials = Credentials(
            token=settings.access_token or None,
            refresh_token=settings.refresh_token or None,
            client_id=settings.client_id or None,
            client_secret=settings.client_secret or None,
            token_uri=settings.token_uri,
            scopes=[_CALENDAR_SCOPE],
        )
        self._service = build("calendar", "v3", credentials=credentials, cache_discovery=False)

    async def list_recent_events(
        self,
        calendar_id: str,
        *,
        time_min: str | None = None,
        max_results: int = 1,
        single_events: bool = True,
        order_by: str = "updated",
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "calendarId": calendar_id,
            "maxResults": max_results,
            "singleEvents": single_events,
            "orderBy": order_by,
        }
        if time_min:
            params["timeMin"] = time_min
        try:
            response = await asyncio.to_thread(self._list_events_sync, params)
        except HttpError as exc:
            self._log_error(action="list_recent_events", exc=exc)
            raise
        except Exception:
            self._log_error(action="list_recent_events")
            raise
        items = response.get("items") if isinstance(response, dict) else None
        return [item for item in items or [] if isinstance(item, dict)]

    async def insert_event(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
        try:
            return await asyncio.to_thread(self._insert_event_sync, calendar_id, body)
        except HttpError as exc:
            self._log_error(action="insert_event", exc=exc)
            raise
        except Exception:
            self._log_error(action="insert_event")
            raise

    def _list_events_sync(self, params: dict[str, Any]) -> dict[str, Any]:
        return self._service.events().list(**params).execute()

    def _insert_event_sync(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]:
        return self._service.events().insert(calendarId=calendar_id, body=body).execute()

    def _log_error(self, *, action: str, exc: HttpError | None = None) -> None:
        extra: dict[str, Any] = {
            "component": _COMPONENT,
            "action": action,
            "result": "error",
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_calendar_http_error", extra=extra)
            return
        logger.exception("google_calendar_unexpected_error", extra=extra)


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None
