"""
Rastreabilidade do core de automação.

- journal → MutationJournal: eventos estruturados por mutação aplicada
"""

from .journal import MutationJournal

__all__ = ["MutationJournal"]
