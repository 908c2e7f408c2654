"""
Mutador em cascata da topologia: desabilitar, habilitar e remover clusters.

Um "cluster" é identificado apenas pelo nome, que pode ser o id de um
replica set ou o nome de um shard cluster. Toda operação testa **as duas
interpretações, sempre**: um nome pode casar com um replica set, com um
shard cluster ou com ambos, e cada casamento é aplicado.

Cascata:
    shard cluster ──> replica sets (Shard.id) ──> processos (member.host)

A seleção de processos vive apenas nas rotinas de replica set; a rotina de
shard delega a elas para cada replica set do shard.

Decisões arquiteturais:
    - Nome sem casamento é no-op, não erro (limpeza em lote best-effort)
    - No-op não gera evento no journal
    - Um host presente em vários Process afeta todas as entradas
    - Listas do aggregate são alteradas in-place (mesma identidade)

Limites explícitos:
    - Não para processos vivos; só edita o documento
    - Não valida corretude da topologia resultante
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from atlas_automation.core.model import AutomationConfig
from atlas_automation.core.search import find_index
from atlas_automation.core.traceability.journal import MutationJournal, record


# ---------------------------------------------------------------------------
# Desabilitar / habilitar
# ---------------------------------------------------------------------------

def _set_disabled_by_replica_set_id(config: AutomationConfig, rs_id: str, disabled: bool) -> Set[str]:
    i, found = find_index(config.replica_sets, lambda rs: rs.id == rs_id)
    if not found:
        return set()

    hosts = set(config.replica_sets[i].member_hosts())
    touched: Set[str] = set()
    for process in config.processes:
        if process.name in hosts:
            process.disabled = disabled
            touched.add(process.name)
    return touched


def _set_disabled_by_shard_name(config: AutomationConfig, name: str, disabled: bool) -> Set[str]:
    i, found = find_index(config.sharding, lambda s: s.name == name)
    if not found:
        return set()

    touched: Set[str] = set()
    for rs_id in config.sharding[i].replica_set_ids():
        touched |= _set_disabled_by_replica_set_id(config, rs_id, disabled)
    return touched


def set_disabled_by_cluster_name(
    config: AutomationConfig,
    name: str,
    disabled: bool,
    *,
    journal: Optional[MutationJournal] = None,
) -> None:
    """
    Marca `disabled` em todos os processos do cluster `name`.

    O nome é testado como replica set **e** como shard cluster, sem
    curto-circuito.
    """
    # obrigatório para o control plane, mesmo vazio
    config.auth.ensure_deployment_auth_mechanisms()

    touched = _set_disabled_by_replica_set_id(config, name, disabled)
    touched |= _set_disabled_by_shard_name(config, name, disabled)
    if not touched:
        return

    record(
        journal,
        operation="topology.shutdown" if disabled else "topology.startup",
        message=f"{len(touched)} processo(s) marcados disabled={disabled}",
        cluster_name=name,
        disabled=disabled,
        processes_updated=sorted(touched),
    )


def shutdown(config: AutomationConfig, name: str, *, journal: Optional[MutationJournal] = None) -> None:
    """Desabilita todos os processos do cluster informado."""
    set_disabled_by_cluster_name(config, name, True, journal=journal)


def startup(config: AutomationConfig, name: str, *, journal: Optional[MutationJournal] = None) -> None:
    """Habilita todos os processos do cluster informado."""
    set_disabled_by_cluster_name(config, name, False, journal=journal)


# ---------------------------------------------------------------------------
# Remoção
# ---------------------------------------------------------------------------

def _remove_by_replica_set_id(config: AutomationConfig, rs_id: str, removed: Dict[str, List[str]]) -> None:
    i, found = find_index(config.replica_sets, lambda rs: rs.id == rs_id)
    if not found:
        return

    rs = config.replica_sets.pop(i)
    removed["replica_sets"].append(rs.id)

    hosts = set(rs.member_hosts())
    kept = []
    for process in config.processes:
        if process.name in hosts:
            removed["processes"].append(process.name)
        else:
            kept.append(process)
    config.processes[:] = kept


def _remove_by_shard_name(config: AutomationConfig, name: str, removed: Dict[str, List[str]]) -> None:
    i, found = find_index(config.sharding, lambda s: s.name == name)
    if not found:
        return

    shard_cluster = config.sharding.pop(i)
    removed["sharding"].append(shard_cluster.name)
    for rs_id in shard_cluster.replica_set_ids():
        _remove_by_replica_set_id(config, rs_id, removed)


def remove_by_cluster_name(
    config: AutomationConfig,
    name: str,
    *,
    journal: Optional[MutationJournal] = None,
) -> None:
    """
    Remove o cluster `name` e os processos associados do documento.

    Casamento como replica set remove a entrada e todos os processos dos
    seus membros; casamento como shard cluster remove a entrada e, para
    cada replica set do shard, aplica a mesma remoção de replica set.
    """
    config.auth.ensure_deployment_auth_mechanisms()

    removed: Dict[str, List[str]] = {"replica_sets": [], "sharding": [], "processes": []}
    _remove_by_replica_set_id(config, name, removed)
    _remove_by_shard_name(config, name, removed)
    if not any(removed.values()):
        return

    record(
        journal,
        operation="topology.remove",
        message=(
            f"removidos {len(removed['sharding'])} shard cluster(s), "
            f"{len(removed['replica_sets'])} replica set(s), "
            f"{len(removed['processes'])} processo(s)"
        ),
        cluster_name=name,
        sharding_removed=removed["sharding"],
        replica_sets_removed=removed["replica_sets"],
        processes_removed=removed["processes"],
    )
