"""
Modelo de dados do automation config.

- topology          → Process, ReplicaSet, ReplicaSetMember, ShardingConfig, Shard
- auth              → Auth, MongoDBUser, Role, ScramShaCreds
- indexes           → IndexConfig
- automation_config → AutomationConfig (aggregate root)
"""

from .auth import Auth, MongoDBUser, Role, ScramShaCreds
from .automation_config import AutomationConfig
from .indexes import IndexConfig
from .topology import Process, ReplicaSet, ReplicaSetMember, Shard, ShardingConfig

__all__ = [
    "Auth",
    "AutomationConfig",
    "IndexConfig",
    "MongoDBUser",
    "Process",
    "ReplicaSet",
    "ReplicaSetMember",
    "Role",
    "ScramShaCreds",
    "Shard",
    "ShardingConfig",
]
