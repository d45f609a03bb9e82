"""Entrypoint do calendar-relay.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import SyncComponents, create_sync_components
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable
    from contextlib import AbstractAsyncContextManager

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def _bind_components(app: FastAPI, components: SyncComponents) -> None:
    app.state.destination_registry = components.registry
    app.state.dispatcher = components.dispatcher
    app.state.google_client = components.google_client
    app.state.outlook_client = components.outlook_client
    app.state.google_handler = components.google_handler
    app.state.outlook_handler = components.outlook_handler


def _build_lifespan(
    components_factory: Callable[[], SyncComponents],
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Gerencia ciclo de vida da aplicação.

        Startup:
        - Valida configurações
        - Cria clients, registry, dispatcher e handlers (uma vez por processo)
        """
        logger.info("app_starting", extra={"service": "calendar-relay"})
        validate_runtime_settings()
        _bind_components(app, components_factory())

        yield

        logger.info("app_shutting_down", extra={"service": "calendar-relay"})

    return lifespan


def create_app(
    components_factory: Callable[[], SyncComponents] = create_sync_components,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        components_factory: Fábrica dos componentes de sincronização
            (substituível em testes).

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="calendar-relay",
        description="Replicação de eventos entre Google Calendar e Outlook",
        version="1.0.0",
        lifespan=_build_lifespan(components_factory),
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "calendar-relay"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    port = get_base_settings().port
    logger.info("Server running on port %s", port)
    uvicorn.run("app.app:app", host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
