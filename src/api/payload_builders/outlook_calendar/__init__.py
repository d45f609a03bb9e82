"""Builders de eventos para Outlook Calendar (Microsoft Graph)."""

from .event import build_outlook_copy, build_outlook_event

__all__ = ["build_outlook_copy", "build_outlook_event"]
