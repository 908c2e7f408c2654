"""
Atlas Automation — Canonical Exceptions (v1)

Este módulo define as exceções tipadas levantadas pelos mutadores do
automation config.

Objetivo:
- Permitir que mutadores levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para AutomationErrorPayload
- Evitar ValueError/RuntimeError genéricos nas fronteiras do core

Regras:
- Nenhuma exceção é registrada em journal ou retentada internamente.
- Exceções carregam apenas dados estruturados (serializáveis).
- Cada classe expõe um `code` estável, definido em `core.errors`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from .errors import (
    DUPLICATE_ENTITY,
    INTERNAL_INVARIANT_VIOLATION,
    NOT_FOUND,
    RANDOM_SOURCE_FAILURE,
    UNINITIALIZED_INPUT,
    UNSUPPORTED_MECHANISM,
)


@dataclass(frozen=True, eq=False)
class AutomationException(Exception):
    """Base class para exceções do core de automação.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    code: ClassVar[str] = INTERNAL_INVARIANT_VIOLATION

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Entrada / diretório
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class UninitializedInput(AutomationException):
    """Referência ao automation config ausente onde é obrigatória."""

    code: ClassVar[str] = UNINITIALIZED_INPUT


@dataclass(frozen=True, eq=False)
class DuplicateEntity(AutomationException):
    """Entidade com a mesma identidade já existe (ex.: IndexConfig)."""

    code: ClassVar[str] = DUPLICATE_ENTITY


@dataclass(frozen=True, eq=False)
class NotFound(AutomationException):
    """Entidade alvo de remoção não existe (ex.: usuário)."""

    code: ClassVar[str] = NOT_FOUND


# ---------------------------------------------------------------------------
# Segurança / credenciais
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class UnsupportedMechanism(AutomationException):
    """Mecanismo de autenticação fora do conjunto suportado."""

    code: ClassVar[str] = UNSUPPORTED_MECHANISM


@dataclass(frozen=True, eq=False)
class RandomSourceFailure(AutomationException):
    """Fonte criptográfica de aleatoriedade falhou (salt, senha ou key)."""

    code: ClassVar[str] = RANDOM_SOURCE_FAILURE


@dataclass(frozen=True, eq=False)
class InternalInvariantViolation(AutomationException):
    """Estado inalcançável: mecanismo validado não reconhecido na derivação."""

    code: ClassVar[str] = INTERNAL_INVARIANT_VIOLATION
