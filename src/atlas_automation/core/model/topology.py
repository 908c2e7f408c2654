"""
Tipos de topologia do automation config.

Processos, replica sets e shard clusters são modelados como coleções
ordenadas paralelas, pertencentes ao `AutomationConfig`. A única ligação
entre elas é por identificador:

    - ReplicaSetMember.host  -> Process.name
    - Shard.id               -> ReplicaSet.id

Invariantes:
    - Nenhum tipo guarda referência direta a outro (sem ciclos de posse)
    - Um mesmo host pode aparecer em mais de um Process; buscas por host
      sempre consideram todas as ocorrências
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Process:
    """Processo gerenciado pelo automation agent (mongod/mongos).

    `name` é o identificador do processo, referenciado pelos membros de
    replica set. `disabled` indica que o agent deve manter o processo parado.
    """

    name: str
    disabled: bool = False
    process_type: str = "mongod"
    hostname: str = ""


@dataclass
class ReplicaSetMember:
    host: str
    member_id: int = 0


@dataclass
class ReplicaSet:
    """Replica set: grupo nomeado de processos com o mesmo dataset replicado."""

    id: str
    members: List[ReplicaSetMember] = field(default_factory=list)

    def member_hosts(self) -> List[str]:
        return [m.host for m in self.members]


@dataclass
class Shard:
    # identificador do replica set que sustenta o shard
    id: str


@dataclass
class ShardingConfig:
    """Shard cluster: agrupamento nomeado de replica sets particionando dados."""

    name: str
    shards: List[Shard] = field(default_factory=list)

    def replica_set_ids(self) -> List[str]:
        return [s.id for s in self.shards]
