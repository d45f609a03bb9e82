"""Webhook Outlook: handshake de validação e parsing de notificações."""

from .receive import MissingEventDataError, extract_notification_id
from .verify import MissingValidationTokenError, verify_validation_token

__all__ = [
    "MissingEventDataError",
    "MissingValidationTokenError",
    "extract_notification_id",
    "verify_validation_token",
]
