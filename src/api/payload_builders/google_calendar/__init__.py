"""Builders de eventos para Google Calendar."""

from .event import build_google_copy, build_google_event

__all__ = ["build_google_copy", "build_google_event"]
