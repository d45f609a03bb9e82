"""App — núcleo da sincronização: wiring, handlers, serviços e infraestrutura.

Subpastas:
- bootstrap/: composition root (clients, registry, dispatcher, handlers)
- coordinators/: fluxos por provider de origem (fetch → guard → fan-out)
- domain/: modelos canônicos (CalendarEvent, DestinationConfig, resultados)
- services/: tradução, loop guard, registry e fan-out (sem IO direto)
- infra/: clients concretos (Google API, Microsoft Graph, HTTP)
- protocols/: contratos dos clients de calendário
- observability/: correlation_id e métricas via logs estruturados

Padrão: app executa; api adapta; config configura.
"""
