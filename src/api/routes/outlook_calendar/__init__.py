"""Rotas do webhook Outlook Calendar."""
