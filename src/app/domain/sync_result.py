"""Resultado da replicacao de um evento para os destinos configurados."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

OutcomeStatus = Literal["success", "failed", "config_error"]


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """Resultado do envio para um unico destino."""

    destination: str
    status: OutcomeStatus
    error: str | None = None
    created_id: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "success"


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Resultado agregado do fan-out, na ordem dos destinos."""

    outcomes: tuple[DispatchOutcome, ...] = ()

    @property
    def succeeded(self) -> tuple[DispatchOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> tuple[DispatchOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.ok)

    @property
    def has_failures(self) -> bool:
        return any(not outcome.ok for outcome in self.outcomes)


__all__ = ["DispatchOutcome", "DispatchResult", "OutcomeStatus"]
