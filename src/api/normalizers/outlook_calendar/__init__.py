"""Normalizer Outlook Calendar — conversão de eventos Microsoft Graph para o modelo canônico."""

from .normalizer import normalize_outlook_event

__all__ = ["normalize_outlook_event"]
