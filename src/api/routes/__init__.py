"""Rotas HTTP da API — adapters de entrada por provider.

Estrutura:
- routes/google_calendar/: webhook Google Calendar
- routes/outlook_calendar/: webhook e handshake Outlook Calendar
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
