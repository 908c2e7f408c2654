"""
Busca canônica por identidade sobre coleções ordenadas.

Este módulo implementa o único utilitário de lookup usado pelos mutadores
do automation config. Processos, replica sets, shard clusters, usuários e
index configs são coleções ordenadas paralelas (arena de entidades) ligadas
apenas por identificadores; toda busca passa por aqui.

Princípios fundamentais:
    - Função pura: nenhuma coleção é mutada
    - Ausência não é erro; o chamador decide com base no flag de presença
    - A primeira ocorrência vence (ordem da coleção é respeitada)

Limites explícitos:
    - Não garante unicidade de identidade
    - Não indexa nem mantém cache entre chamadas
"""

from __future__ import annotations

from typing import Callable, Sequence, Tuple, TypeVar


T = TypeVar("T")


def find_index(items: Sequence[T], predicate: Callable[[T], bool]) -> Tuple[int, bool]:
    """
    Retorna a posição do primeiro elemento que satisfaz `predicate`.

    Decisões arquiteturais:
        - Retorno em par (posição, encontrado) em vez de exceção
        - Quando não encontrado, a posição é -1 e não deve ser usada

    Args:
        items (Sequence[T]): Coleção ordenada (lista do aggregate).
        predicate (Callable[[T], bool]): Predicado de igualdade por identidade.

    Returns:
        Tuple[int, bool]: (posição, True) ou (-1, False).
    """
    for i, item in enumerate(items or ()):
        if predicate(item):
            return i, True
    return -1, False
