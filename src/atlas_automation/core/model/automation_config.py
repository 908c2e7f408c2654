"""
AutomationConfig — aggregate root do documento de automação.

O AutomationConfig descreve a topologia desejada e a configuração de
segurança de uma implantação. Todos os mutadores do pacote recebem uma
instância e a alteram **in-place**; o aggregate nunca é substituído.

Coleções pertencentes ao aggregate:
    - processes      → List[Process]
    - replica_sets   → List[ReplicaSet]
    - sharding       → List[ShardingConfig]
    - index_configs  → List[IndexConfig]
    - auth           → Auth

Decisões arquiteturais:
    - Coleções ordenadas paralelas ligadas por identificador
    - Nenhuma sincronização interna: o chamador é dono exclusivo do
      aggregate durante uma chamada
    - Busca e persistência no control plane são responsabilidade externa

Limites explícitos:
    - Não serializa para JSON/BSON
    - Não valida corretude da topologia
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .auth import Auth
from .indexes import IndexConfig
from .topology import Process, ReplicaSet, ShardingConfig


@dataclass
class AutomationConfig:
    processes: List[Process] = field(default_factory=list)
    replica_sets: List[ReplicaSet] = field(default_factory=list)
    sharding: List[ShardingConfig] = field(default_factory=list)
    index_configs: List[IndexConfig] = field(default_factory=list)
    auth: Auth = field(default_factory=Auth)

    def process_names(self) -> List[str]:
        return [p.name for p in self.processes]
