"""Agregador de rotas: health na raiz e um webhook por provider de origem.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.google_calendar.webhook import router as google_router
from api.routes.health.router import router as health_router
from api.routes.outlook_calendar.webhook import router as outlook_router

# provider -> router montado em /webhook/{provider}
WEBHOOK_ROUTERS: dict[str, APIRouter] = {
    "google": google_router,
    "outlook": outlook_router,
}


def create_api_router() -> APIRouter:
    """Cria router principal com health e os webhooks registrados."""
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])

    for provider, webhook_router in WEBHOOK_ROUTERS.items():
        api_router.include_router(
            webhook_router,
            prefix=f"/webhook/{provider}",
            tags=[provider],
        )

    return api_router
