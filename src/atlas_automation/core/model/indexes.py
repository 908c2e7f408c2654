"""
IndexConfig — índice declarado no automation config.

A identidade de um IndexConfig é composta por:
    - rs_name
    - db_name
    - collection_name
    - key: sequência ordenada de pares (campo, direção)

Duas chaves são iguais apenas se têm o mesmo tamanho e cada par coincide
em campo e direção, na mesma ordem. `{"a": 1, "b": 1}` e `{"b": 1, "a": 1}`
são índices distintos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple


IndexKey = Tuple[str, Any]


def _same_key(left: Sequence[Sequence[Any]], right: Sequence[Sequence[Any]]) -> bool:
    if len(left) != len(right):
        return False
    for a, b in zip(left, right):
        if a[0] != b[0] or a[1] != b[1]:
            return False
    return True


@dataclass
class IndexConfig:
    rs_name: str
    db_name: str
    collection_name: str
    key: List[IndexKey] = field(default_factory=list)

    def same_identity(self, other: "IndexConfig") -> bool:
        """True quando `other` descreve o mesmo índice (ordem de chave relevante)."""
        return (
            self.rs_name == other.rs_name
            and self.db_name == other.db_name
            and self.collection_name == other.collection_name
            and _same_key(self.key, other.key)
        )
