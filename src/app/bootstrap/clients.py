"""Factories dos clients de calendário (Google e Outlook).

Cada client é criado uma vez no startup e reaproveitado por todas as
notificações. Provider sem credencial resulta em None (com warning).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.infra.calendar.google_calendar_client import GoogleCalendarClient
    from app.infra.calendar.outlook_calendar_client import OutlookCalendarClient
    from config.settings import GoogleCalendarSettings, OutlookCalendarSettings

logger = logging.getLogger(__name__)


def create_google_calendar_client(
    settings: GoogleCalendarSettings,
) -> GoogleCalendarClient | None:
    """Cria client Google Calendar.

    Returns:
        Client configurado ou None se não houver credenciais
    """
    if not settings.is_configured:
        logger.warning(
            "google_calendar_client_not_configured",
            extra={"component": "bootstrap"},
        )
        return None

    from app.infra.calendar.google_calendar_client import GoogleCalendarClient

    client = GoogleCalendarClient(settings=settings)
    logger.info("google_calendar_client_created", extra={"calendar_id": settings.calendar_id})
    return client


def create_outlook_calendar_client(
    settings: OutlookCalendarSettings,
) -> OutlookCalendarClient | None:
    """Cria client Outlook Calendar (Microsoft Graph).

    Returns:
        Client configurado ou None se MS_ACCESS_TOKEN estiver ausente
    """
    if not settings.is_configured:
        logger.warning(
            "outlook_calendar_client_not_configured",
            extra={"component": "bootstrap"},
        )
        return None

    from app.infra.calendar.outlook_calendar_client import OutlookCalendarClient

    client = OutlookCalendarClient.from_settings(settings)
    logger.info(
        "outlook_calendar_client_created",
        extra={"max_retries": settings.max_retries},
    )
    return client
