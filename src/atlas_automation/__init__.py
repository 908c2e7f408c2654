# src/atlas_automation/__init__.py
"""
Atlas Automation — engine de mutação em memória do automation config.

Este pacote raiz define o namespace público do engine que edita o
documento de automação de uma implantação de banco de dados: topologia
(processos, replica sets, shard clusters), diretório de usuários e índices,
credenciais SCRAM e política de mecanismos de autenticação.

Princípios centrais:
    - O aggregate é mutado in-place, nunca substituído
    - Coleções paralelas ligadas apenas por identificadores
    - Operações síncronas; erros tipados devolvidos ao chamador
    - Constantes vivem em uma tabela de settings imutável

Arquitetura em alto nível:
    - core.model        → AutomationConfig e tipos associados
    - core.search       → lookup genérico por predicado
    - core.config       → settings (load, merge, hashing)
    - topology          → shutdown / startup / remoção em cascata
    - directory         → usuários e index configs
    - security          → credenciais SCRAM e enable_mechanism

Limites explícitos:
    - Não busca nem persiste o aggregate no control plane
    - Não define formato de wire (JSON/BSON)
    - Não é um validador geral de topologia
"""

from .core.config import DEFAULT_SETTINGS, EngineSettings, load_settings
from .core.errors import AutomationErrorPayload, error_payload_from_exception
from .core.exceptions import (
    AutomationException,
    DuplicateEntity,
    InternalInvariantViolation,
    NotFound,
    RandomSourceFailure,
    UninitializedInput,
    UnsupportedMechanism,
)
from .core.model import (
    Auth,
    AutomationConfig,
    IndexConfig,
    MongoDBUser,
    Process,
    ReplicaSet,
    ReplicaSetMember,
    Role,
    ScramShaCreds,
    Shard,
    ShardingConfig,
)
from .core.search import find_index
from .core.traceability import MutationJournal
from .directory import add_index_config, add_user, remove_user
from .security import configure_scram_credentials, enable_mechanism
from .topology import remove_by_cluster_name, shutdown, startup

__all__ = [
    "Auth",
    "AutomationConfig",
    "AutomationErrorPayload",
    "AutomationException",
    "DEFAULT_SETTINGS",
    "DuplicateEntity",
    "EngineSettings",
    "IndexConfig",
    "InternalInvariantViolation",
    "MongoDBUser",
    "MutationJournal",
    "NotFound",
    "Process",
    "RandomSourceFailure",
    "ReplicaSet",
    "ReplicaSetMember",
    "Role",
    "ScramShaCreds",
    "Shard",
    "ShardingConfig",
    "UninitializedInput",
    "UnsupportedMechanism",
    "add_index_config",
    "add_user",
    "configure_scram_credentials",
    "enable_mechanism",
    "error_payload_from_exception",
    "find_index",
    "load_settings",
    "remove_by_cluster_name",
    "remove_user",
    "shutdown",
    "startup",
]
