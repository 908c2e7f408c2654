"""
Diretório de usuários e índices do automation config.
"""

from .indexes import add_index_config, index_config_matcher
from .users import add_user, remove_user

__all__ = [
    "add_index_config",
    "add_user",
    "index_config_matcher",
    "remove_user",
]
