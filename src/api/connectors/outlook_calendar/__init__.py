"""Connector Outlook Calendar — borda do webhook da Microsoft Graph."""
