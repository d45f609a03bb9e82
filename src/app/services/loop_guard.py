"""Guard deterministico contra loops de sincronizacao.

Qualquer evento cuja descricao/corpo contenha SYNC_TAG foi criado por uma
sincronizacao anterior e nao pode ser replicado de novo. Nao existe store de
dedupe: o marcador e o unico mecanismo.
"""

from __future__ import annotations

from app.domain.calendar_event import SYNC_TAG


def is_synced(text: str | None) -> bool:
    """Retorna True se o texto contem o marcador de sincronizacao."""
    return SYNC_TAG in (text or "")
