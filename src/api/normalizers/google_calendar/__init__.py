"""Normalizer Google Calendar — conversão de eventos da API v3 para o modelo canônico."""

from .normalizer import normalize_google_event

__all__ = ["normalize_google_event"]
