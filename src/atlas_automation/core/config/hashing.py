# src/atlas_automation/core/config/hashing.py
"""
Fingerprint canônico de settings.

O hash identifica a tabela de settings efetiva usada por uma mutação e é
registrado no journal de eventos, permitindo saber com quais constantes
(nome do agent, tamanho de segredo, key-files) um aggregate foi provisionado.

Política (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - UTF-8
    - SHA-256, hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico de um dicionário de settings.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Settings para hashing devem ser dict, recebido: {type(config).__name__}"
        )

    canonical = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
