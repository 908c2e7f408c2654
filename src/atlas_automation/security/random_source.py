"""
Fonte criptográfica de aleatoriedade para salts, senha do agent e shared key.

Toda geração passa por `generate_random_bytes`, que consome
`secrets.token_bytes` (CSPRNG do sistema operacional) ou uma fonte injetada
pelo chamador com a mesma assinatura `(size) -> bytes`.

Invariantes:
    - Qualquer exceção da fonte vira `RandomSourceFailure` (encadeada), de forma síncrona
    - Leitura curta (menos bytes que o pedido) também é falha
    - Strings geradas têm exatamente `length` caracteres
"""

from __future__ import annotations

import base64
import secrets
from typing import Callable, Optional

from atlas_automation.core.exceptions import RandomSourceFailure


RandomSource = Callable[[int], bytes]


def generate_random_bytes(size: int, *, source: Optional[RandomSource] = None) -> bytes:
    draw = source or secrets.token_bytes
    try:
        data = draw(size)
    except Exception as exc:  # noqa: BLE001
        raise RandomSourceFailure(
            message=f"random source failed: {exc}",
            details={"size": size, "exception_class": exc.__class__.__name__},
        ) from exc

    if not isinstance(data, (bytes, bytearray)) or len(data) != size:
        raise RandomSourceFailure(
            message="random source returned an unexpected number of bytes",
            details={
                "size": size,
                "received": len(data) if isinstance(data, (bytes, bytearray)) else type(data).__name__,
            },
        )
    return bytes(data)


def _bytes_for(length: int) -> int:
    # base64 produz 4 caracteres a cada 3 bytes
    return -(-length * 3 // 4)


def generate_random_ascii_string(length: int, *, source: Optional[RandomSource] = None) -> str:
    """String ASCII imprimível (alfabeto base64 URL-safe) com `length` caracteres."""
    raw = generate_random_bytes(_bytes_for(length), source=source)
    return base64.urlsafe_b64encode(raw).decode("ascii")[:length]


def generate_random_base64_string(length: int, *, source: Optional[RandomSource] = None) -> str:
    """String no alfabeto base64 padrão com `length` caracteres (conteúdo de key-file)."""
    raw = generate_random_bytes(_bytes_for(length), source=source)
    return base64.b64encode(raw).decode("ascii")[:length]
