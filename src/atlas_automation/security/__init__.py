"""
Segurança do automation config: credenciais SCRAM e política de mecanismos.

- scram         → derivação de salt / stored key / server key por mecanismo
- random_source → CSPRNG com falhas tipadas
- mechanisms    → enable_mechanism e provisionamento do automation agent
"""

from .mechanisms import SUPPORTED_MECHANISMS, enable_mechanism
from .scram import (
    MECHANISMS,
    MONGODB_CR,
    SCRAM_SHA_256,
    compute_scram_credentials,
    configure_scram_credentials,
)

__all__ = [
    "MECHANISMS",
    "MONGODB_CR",
    "SCRAM_SHA_256",
    "SUPPORTED_MECHANISMS",
    "compute_scram_credentials",
    "configure_scram_credentials",
    "enable_mechanism",
]
