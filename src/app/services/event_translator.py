"""Tradução de eventos entre providers de calendário.

Funções puras: recebem o evento canônico e devolvem o payload nativo do
destino, sempre com o marcador de sincronização concatenado ao texto.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.google_calendar import build_google_copy, build_google_event
from api.payload_builders.outlook_calendar import build_outlook_copy, build_outlook_event
from app.domain.calendar_event import ProviderKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.calendar_event import CalendarEvent


def to_outlook_shape(event: CalendarEvent) -> dict[str, Any]:
    """Google → Outlook: subject, fuso fixo UTC e corpo em texto."""
    return build_outlook_event(event)


def to_google_shape(event: CalendarEvent) -> dict[str, Any]:
    """Outlook → Google: summary e descrição a partir do corpo."""
    return build_google_event(event)


def to_same_provider_shape(
    event: CalendarEvent,
    provider: ProviderKind | None = None,
) -> dict[str, Any]:
    """Cópia no mesmo provider, sem remodelar start/end.

    `provider` (a origem informada ao dispatcher) prevalece sobre
    `event.source_provider`.
    """
    match provider or event.source_provider:
        case ProviderKind.GOOGLE:
            return build_google_copy(event)
        case ProviderKind.OUTLOOK:
            return build_outlook_copy(event)
        case other:
            raise ValueError(f"provider sem builder de cópia: {other!r}")


def select_translator(
    source: ProviderKind,
    destination: ProviderKind,
) -> Callable[[CalendarEvent], dict[str, Any]]:
    """Escolhe o tradutor para o par (origem, destino)."""
    match (source, destination):
        case (ProviderKind.GOOGLE, ProviderKind.OUTLOOK):
            return to_outlook_shape
        case (ProviderKind.OUTLOOK, ProviderKind.GOOGLE):
            return to_google_shape
        case (ProviderKind.GOOGLE, ProviderKind.GOOGLE):
            return build_google_copy
        case (ProviderKind.OUTLOOK, ProviderKind.OUTLOOK):
            return build_outlook_copy
        case _:
            raise ValueError(f"par de providers sem tradutor: {source!r} -> {destination!r}")


__all__ = [
    "select_translator",
    "to_google_shape",
    "to_outlook_shape",
    "to_same_provider_shape",
]
