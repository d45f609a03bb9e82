"""Normalizers por provider — conversão de eventos externos para o modelo canônico.

Estrutura:
- google_calendar/: Google Calendar API v3
- outlook_calendar/: Microsoft Graph (Outlook Calendar)
"""

from .google_calendar import normalize_google_event
from .outlook_calendar import normalize_outlook_event

__all__ = [
    "normalize_google_event",
    "normalize_outlook_event",
]
