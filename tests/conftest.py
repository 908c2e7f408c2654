# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Automation.

Este módulo define fixtures reutilizáveis que fornecem:
- um automation config com topologia shardada e um replica set avulso
- fábricas de usuários
- fontes de aleatoriedade determinísticas e com falha

O objetivo destas fixtures é permitir testes dos mutadores sem depender de:
- control plane remoto
- serialização JSON/BSON
- CSPRNG real (quando o teste exige determinismo)

Decisões arquiteturais:
    - Cada fixture devolve uma instância nova (testes podem mutar à vontade)
    - Fontes de aleatoriedade seguem a assinatura `(size) -> bytes`
    - Topologia descrita por identificadores, como no aggregate real

Invariantes:
    - Nenhuma fixture realiza I/O
    - Nenhuma fixture depende de ordem de execução dos testes

Limites explícitos:
    - Não substituir testes de integração com o control plane
"""

import pytest

from atlas_automation.core.model import (
    AutomationConfig,
    MongoDBUser,
    Process,
    ReplicaSet,
    ReplicaSetMember,
    Role,
    Shard,
    ShardingConfig,
)


def _replica_set(rs_id, hosts):
    return ReplicaSet(
        id=rs_id,
        members=[ReplicaSetMember(host=h, member_id=i) for i, h in enumerate(hosts)],
    )


@pytest.fixture
def shard_hosts() -> dict:
    """
    Mapa replica set -> hosts dos membros da topologia de teste.

    Topologia:
        - shard cluster "shop" com os replica sets "shop_shard_0" e "shop_shard_1"
        - replica set avulso "analytics"
        - mongos "shop_mongos" fora de qualquer replica set
    """
    return {
        "shop_shard_0": ["shop_shard_0_0", "shop_shard_0_1", "shop_shard_0_2"],
        "shop_shard_1": ["shop_shard_1_0", "shop_shard_1_1", "shop_shard_1_2"],
        "analytics": ["analytics_0", "analytics_1"],
    }


@pytest.fixture
def sharded_config(shard_hosts) -> AutomationConfig:
    """
    Fixture que fornece um AutomationConfig com topologia shardada.

    Usado por:
        - Testes de shutdown/startup em cascata
        - Testes de remoção por nome de cluster
        - Testes de no-op para nomes inexistentes

    Returns:
        AutomationConfig: aggregate novo, com `deployment_auth_mechanisms` None.
    """
    processes = [Process(name=h) for hosts in shard_hosts.values() for h in hosts]
    processes.append(Process(name="shop_mongos", process_type="mongos"))

    return AutomationConfig(
        processes=processes,
        replica_sets=[_replica_set(rs_id, hosts) for rs_id, hosts in shard_hosts.items()],
        sharding=[
            ShardingConfig(
                name="shop",
                shards=[Shard(id="shop_shard_0"), Shard(id="shop_shard_1")],
            )
        ],
    )


@pytest.fixture
def make_user():
    """Fábrica de MongoDBUser com role readWrite no próprio database."""

    def _make(username="alice", database="admin"):
        return MongoDBUser(
            username=username,
            database=database,
            roles=[Role(role="readWrite", database=database)],
        )

    return _make


class CountingRandomSource:
    """Fonte determinística: cada chamada devolve bytes de um contador crescente."""

    def __init__(self):
        self.calls = []

    def __call__(self, size):
        self.calls.append(size)
        seed = len(self.calls)
        return bytes((seed + i) % 256 for i in range(size))


@pytest.fixture
def counting_random_source():
    return CountingRandomSource()


@pytest.fixture
def failing_random_source():
    """Fonte que simula esgotamento do CSPRNG do sistema operacional."""

    def _fail(size):
        raise OSError("entropy source unavailable")

    return _fail
