"""Rotas do webhook Google Calendar."""
