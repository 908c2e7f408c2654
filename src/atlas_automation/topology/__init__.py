"""
Mutações de topologia (cascata shard cluster → replica set → processo).
"""

from .cascade import (
    remove_by_cluster_name,
    set_disabled_by_cluster_name,
    shutdown,
    startup,
)

__all__ = [
    "remove_by_cluster_name",
    "set_disabled_by_cluster_name",
    "shutdown",
    "startup",
]
