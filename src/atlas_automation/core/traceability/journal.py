# src/atlas_automation/core/traceability/journal.py
"""
MutationJournal — log estruturado de mutações aplicadas ao aggregate.

O journal é o meio de observabilidade do core: os mutadores recebem um
journal opcional e registram **um evento por mutação bem-sucedida**, com
contagens do que foi alterado. Falhas não são registradas; elas são
devolvidas ao chamador como exceções tipadas.

Formato de evento:
    {
        "operation": "topology.remove",
        "level": "INFO",
        "message": "...",
        "timestamp": "2024-01-01T00:00:00+00:00",
        ...extras (ex.: cluster_name, processes_removed)
    }

Princípios fundamentais:
    - Nenhum evento é emitido implicitamente
    - A ordem de `events` reflete a ordem real das mutações
    - UTC é o timezone canônico dos timestamps
    - O journal é serializável e reconstruível (round-trip)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass
class MutationJournal:
    """Sequência ordenada de eventos de mutação."""

    events: List[Dict[str, Any]] = field(default_factory=list)

    def record(self, *, operation: str, level: str = "INFO", message: str, **extra: Any) -> Dict[str, Any]:
        event = {
            "operation": operation,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
        return event

    def for_operation(self, operation: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e.get("operation") == operation]

    def to_dict(self) -> Dict[str, Any]:
        return {"events": [dict(e) for e in self.events]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MutationJournal":
        return cls(events=[dict(e) for e in (data.get("events") or [])])


def record(journal: Optional[MutationJournal], *, operation: str, message: str, **extra: Any) -> None:
    """Registra no journal quando um foi fornecido pelo chamador."""
    if journal is None:
        return
    journal.record(operation=operation, message=message, **extra)
