# src/atlas_automation/core/config/merge.py
"""
Deep-merge de settings: defaults + overrides locais.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

Invariantes:
    - Nenhum input é mutado
    - Chaves não sobrescritas são preservadas
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any], *, _path: str = "") -> Dict[str, Any]:
    """
    Combina `base` e `override` produzindo um novo dicionário.

    Args:
        base (Dict[str, Any]): Settings base (defaults embutidos ou arquivo).
        override (Dict[str, Any]): Overrides explícitos (arquivo local).

    Returns:
        Dict[str, Any]: Nova estrutura resolvida.

    Raises:
        ConfigTypeConflictError: Se a mesma chave tiver tipos incompatíveis.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts em '{_path or '<root>'}', recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)

    for key, new_value in override.items():
        key_path = f"{_path}.{key}" if _path else str(key)

        if key not in merged:
            merged[key] = deepcopy(new_value)
            continue

        current = merged[key]

        if isinstance(current, dict) and isinstance(new_value, dict):
            merged[key] = deep_merge(current, new_value, _path=key_path)
            continue

        if isinstance(new_value, list):
            merged[key] = deepcopy(new_value)
            continue

        if type(current) is not type(new_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key_path}': "
                f"{type(current).__name__} vs {type(new_value).__name__}"
            )

        merged[key] = deepcopy(new_value)

    return merged
