"""
Diretório de usuários do bloco de autenticação.

Regras:
- `add_user` acrescenta sempre; pares (username, database) duplicados são
  permitidos e a unicidade é responsabilidade do chamador.
- `remove_user` remove a primeira ocorrência do par e preserva a ordem do
  restante; ausência é `NotFound`.
"""

from __future__ import annotations

from typing import Optional

from atlas_automation.core.exceptions import NotFound
from atlas_automation.core.model import AutomationConfig, MongoDBUser
from atlas_automation.core.search import find_index
from atlas_automation.core.traceability.journal import MutationJournal, record


def add_user(config: AutomationConfig, user: MongoDBUser, *, journal: Optional[MutationJournal] = None) -> None:
    config.auth.users.append(user)
    record(
        journal,
        operation="directory.add_user",
        message=f"usuário '{user.username}' adicionado em '{user.database}'",
        username=user.username,
        database=user.database,
    )


def remove_user(
    config: AutomationConfig,
    username: str,
    database: str,
    *,
    journal: Optional[MutationJournal] = None,
) -> None:
    """Remove o usuário identificado por (username, database).

    Raises:
        NotFound: Se o par não existir no diretório.
    """
    pos, found = find_index(config.auth.users, lambda u: u.matches(username, database))
    if not found:
        raise NotFound(
            message=f"user '{username}' not found for '{database}'",
            details={"username": username, "database": database},
            hint="Liste os usuários do automation config antes de remover.",
        )

    del config.auth.users[pos]
    record(
        journal,
        operation="directory.remove_user",
        message=f"usuário '{username}' removido de '{database}'",
        username=username,
        database=database,
    )
