"""Protocolos e contratos do core da aplicação."""

from .calendar_provider import (
    GoogleCalendarProviderProtocol,
    OutlookCalendarProviderProtocol,
)

__all__ = [
    "GoogleCalendarProviderProtocol",
    "OutlookCalendarProviderProtocol",
]
