"""Handshake de validação exigido pela Microsoft Graph ao criar a subscription."""

from __future__ import annotations


class MissingValidationTokenError(ValueError):
    """Request de validação sem `validationToken`."""


def verify_validation_token(validation_token: str | None) -> str:
    """Retorna o token a ser devolvido como texto puro.

    Raises:
        MissingValidationTokenError: Se o token estiver ausente ou vazio
    """
    if not validation_token:
        raise MissingValidationTokenError("missing_validation_token")
    return validation_token
