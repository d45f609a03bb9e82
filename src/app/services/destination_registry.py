"""Registro imutável dos calendários de destino.

Carregado uma vez no startup e injetado no dispatcher. Não há operação de
mutação: incluir/remover destinos exige novo deploy.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from app.domain.calendar_event import DestinationConfig
    from config.settings import SyncSettings

logger = logging.getLogger(__name__)


class DestinationRegistry:
    """Sequência ordenada e somente leitura de DestinationConfig."""

    __slots__ = ("_destinations",)

    def __init__(self, destinations: Iterable[DestinationConfig]) -> None:
        self._destinations: tuple[DestinationConfig, ...] = tuple(destinations)

    @classmethod
    def from_settings(cls, settings: SyncSettings) -> DestinationRegistry:
        registry = cls(settings.destinations)
        for destination in registry.unrecognized():
            logger.warning(
                "sync_destination_unrecognized_provider",
                extra={
                    "component": "destination_registry",
                    "destination": destination.name,
                    "provider": destination.provider,
                },
            )
        logger.info(
            "sync_destinations_loaded",
            extra={"component": "destination_registry", "count": len(registry)},
        )
        return registry

    @property
    def destinations(self) -> tuple[DestinationConfig, ...]:
        return self._destinations

    def unrecognized(self) -> tuple[DestinationConfig, ...]:
        """Destinos cujo provider não é suportado."""
        return tuple(d for d in self._destinations if d.provider_kind is None)

    def __iter__(self) -> Iterator[DestinationConfig]:
        return iter(self._destinations)

    def __len__(self) -> int:
        return len(self._destinations)
