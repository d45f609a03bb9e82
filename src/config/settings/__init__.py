"""Agregador de settings do calendar-relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Provider settings
from config.settings.google_calendar import (
    GOOGLE_CALENDAR_API_VERSION,
    GoogleCalendarSettings,
    get_google_calendar_settings,
)
from config.settings.outlook_calendar import (
    GRAPH_API_BASE_URL,
    OutlookCalendarSettings,
    get_outlook_calendar_settings,
)

# Sync settings
from config.settings.sync import (
    DEFAULT_DESTINATIONS,
    SyncSettings,
    get_sync_settings,
)

__all__ = [
    "DEFAULT_DESTINATIONS",
    # Constants
    "GOOGLE_CALENDAR_API_VERSION",
    "GRAPH_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Providers
    "GoogleCalendarSettings",
    "OutlookCalendarSettings",
    # Sync
    "SyncSettings",
    "get_base_settings",
    "get_google_calendar_settings",
    "get_outlook_calendar_settings",
    "get_sync_settings",
]
