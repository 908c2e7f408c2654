"""Testes do diretório de usuários (add_user / remove_user).

Cobre:
- inserção incondicional (duplicatas permitidas)
- remoção da primeira ocorrência, preservando a ordem
- NotFound quando o par (username, database) não existe
"""

import pytest

from atlas_automation.core.exceptions import NotFound
from atlas_automation.core.model import AutomationConfig
from atlas_automation.core.traceability.journal import MutationJournal
from atlas_automation.directory.users import add_user, remove_user


def _pairs(config):
    return [(u.username, u.database) for u in config.auth.users]


def test_add_user_appends_even_duplicates(make_user):
    config = AutomationConfig()

    add_user(config, make_user("alice", "admin"))
    add_user(config, make_user("alice", "admin"))

    assert _pairs(config) == [("alice", "admin"), ("alice", "admin")]


def test_remove_user_keeps_order_of_the_rest(make_user):
    config = AutomationConfig()
    for name in ("alice", "bob", "carol"):
        add_user(config, make_user(name, "admin"))

    remove_user(config, "bob", "admin")

    assert _pairs(config) == [("alice", "admin"), ("carol", "admin")]


def test_remove_user_only_first_match(make_user):
    config = AutomationConfig()
    first = make_user("alice", "admin")
    second = make_user("alice", "admin")
    add_user(config, first)
    add_user(config, second)

    remove_user(config, "alice", "admin")

    assert config.auth.users == [second]
    assert config.auth.users[0] is second


def test_remove_user_identity_includes_database(make_user):
    config = AutomationConfig()
    add_user(config, make_user("bob", "reporting"))

    with pytest.raises(NotFound) as exc_info:
        remove_user(config, "bob", "admin")

    assert exc_info.value.details == {"username": "bob", "database": "admin"}
    assert _pairs(config) == [("bob", "reporting")]


def test_remove_missing_user_raises_not_found():
    config = AutomationConfig()

    with pytest.raises(NotFound):
        remove_user(config, "bob", "admin")

    assert config.auth.users == []


def test_journal_records_only_successful_changes(make_user):
    config = AutomationConfig()
    journal = MutationJournal()

    add_user(config, make_user("alice", "admin"), journal=journal)
    with pytest.raises(NotFound):
        remove_user(config, "bob", "admin", journal=journal)
    remove_user(config, "alice", "admin", journal=journal)

    assert [e["operation"] for e in journal.events] == [
        "directory.add_user",
        "directory.remove_user",
    ]
