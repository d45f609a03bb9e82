"""Connectors por provider — parsing de notificações recebidas.

Estrutura:
- outlook_calendar/: change notifications e handshake da Microsoft Graph

O push do Google não tem corpo útil; não há connector para ele.
"""

__all__: list[str] = []
