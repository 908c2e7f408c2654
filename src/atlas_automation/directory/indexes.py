"""
Diretório de índices (IndexConfig) do automation config.

A identidade de um índice é (rs_name, db_name, collection_name, key), com a
chave comparada por tamanho e depois par a par (campo e direção), em ordem.
Dois índices com a mesma identidade nunca coexistem em `index_configs`.
"""

from __future__ import annotations

from typing import Callable, Optional

from atlas_automation.core.exceptions import DuplicateEntity, UninitializedInput
from atlas_automation.core.model import AutomationConfig, IndexConfig
from atlas_automation.core.search import find_index
from atlas_automation.core.traceability.journal import MutationJournal, record


def index_config_matcher(new_index: IndexConfig) -> Callable[[IndexConfig], bool]:
    """Predicado de identidade para uso com `find_index`."""
    return lambda index: new_index.same_identity(index)


def add_index_config(
    config: Optional[AutomationConfig],
    new_index: IndexConfig,
    *,
    journal: Optional[MutationJournal] = None,
) -> None:
    """
    Acrescenta `new_index` ao automation config.

    Raises:
        UninitializedInput: Se `config` for None.
        DuplicateEntity: Se já existir índice com a mesma identidade.
    """
    if config is None:
        raise UninitializedInput(
            message="the Automation Config has not been initialized",
            details={"operation": "add_index_config"},
            hint="Busque o automation config no control plane antes de mutá-lo.",
        )

    pos, exists = find_index(config.index_configs, index_config_matcher(new_index))
    if exists:
        raise DuplicateEntity(
            message="index already exists",
            details={
                "rs_name": new_index.rs_name,
                "db_name": new_index.db_name,
                "collection_name": new_index.collection_name,
                "key": [list(k) for k in new_index.key],
                "position": pos,
            },
        )

    config.index_configs.append(new_index)
    record(
        journal,
        operation="directory.add_index_config",
        message=f"índice adicionado em {new_index.db_name}.{new_index.collection_name}",
        rs_name=new_index.rs_name,
        db_name=new_index.db_name,
        collection_name=new_index.collection_name,
    )
