"""Payload builders por provider — construção de eventos para APIs externas.

Estrutura:
- google_calendar/: corpo de events.insert (Google Calendar API v3)
- outlook_calendar/: corpo de POST /events (Microsoft Graph v1.0)

Todo payload gerado aqui carrega o marcador de sincronização.
"""

__all__: list[str] = []
