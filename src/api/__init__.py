"""API — camada de borda dos providers de calendário.

Responsabilidades:
- Receber webhooks (Google push, Microsoft Graph change notifications)
- Validar o handshake de subscription da Graph
- Normalizar eventos externos para o modelo canônico
- Construir payloads nativos de cada provider

Subpastas:
- connectors/: parsing de notificações por provider
- normalizers/: payload externo → CalendarEvent
- payload_builders/: CalendarEvent → payload do provider de destino
- routes/: endpoints HTTP (webhooks, health)

NÃO PODE conter: fan-out, escolha de destinos, chamadas aos clients.
"""
