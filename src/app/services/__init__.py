"""Serviços de aplicação.

Unidades reutilizáveis de sincronização (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.destination_registry import DestinationRegistry
from app.services.fanout_dispatcher import FanoutDispatcher
from app.services.loop_guard import is_synced

__all__ = [
    "DestinationRegistry",
    "FanoutDispatcher",
    "is_synced",
]
