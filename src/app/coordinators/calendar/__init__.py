"""Handlers de notificação por provider de origem."""

from app.coordinators.calendar.google_handler import GoogleWebhookHandler
from app.coordinators.calendar.outlook_handler import OutlookWebhookHandler

__all__ = ["GoogleWebhookHandler", "OutlookWebhookHandler"]
