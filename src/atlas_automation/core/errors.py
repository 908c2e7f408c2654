"""
Atlas Automation — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do core de automação.
Erros fazem parte do contrato operacional com o orquestrador externo
(quem busca, muta e persiste o automation config), devendo ser:

- explícitos
- serializáveis
- acionáveis

O core nunca registra nem retenta erros: eles são devolvidos ao chamador
imediato, que decide a política de retry.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AutomationErrorPayload:
    """
    Payload canônico de erro do core de automação.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Entrada / diretório
UNINITIALIZED_INPUT = "UNINITIALIZED_INPUT"
DUPLICATE_ENTITY = "DUPLICATE_ENTITY"
NOT_FOUND = "NOT_FOUND"

# Segurança
UNSUPPORTED_MECHANISM = "UNSUPPORTED_MECHANISM"
RANDOM_SOURCE_FAILURE = "RANDOM_SOURCE_FAILURE"

# Invariantes internas
INTERNAL_INVARIANT_VIOLATION = "INTERNAL_INVARIANT_VIOLATION"


ERROR_CODES: List[str] = [
    UNINITIALIZED_INPUT,
    DUPLICATE_ENTITY,
    NOT_FOUND,
    UNSUPPORTED_MECHANISM,
    RANDOM_SOURCE_FAILURE,
    INTERNAL_INVARIANT_VIOLATION,
]


# ---------------------------------------------------------------------------
# Mapeamento exceção -> payload
# ---------------------------------------------------------------------------

def error_payload_from_exception(exc: BaseException) -> AutomationErrorPayload:
    """Converte exceções em AutomationErrorPayload (serializável, acionável).

    Regras:
    - AutomationException: já vem com code/message/details/hint.
    - Outras exceções: encapsular como INTERNAL_INVARIANT_VIOLATION sem expor stack trace.
    """
    # import tardio: exceptions depende deste módulo para o catálogo
    from .exceptions import AutomationException

    if isinstance(exc, AutomationException):
        return AutomationErrorPayload(
            type=exc.code,
            message=str(exc) or "Erro de mutação",
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    return AutomationErrorPayload(
        type=INTERNAL_INVARIANT_VIOLATION,
        message=str(exc) or "Erro inesperado durante a mutação",
        details={
            "exception_class": exc.__class__.__name__,
        },
        hint="Verifique o stacktrace do chamador. Nenhum fallback é aplicado automaticamente.",
    )
