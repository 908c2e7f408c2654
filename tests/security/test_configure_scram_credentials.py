"""Testes de configure_scram_credentials.

Cobre:
- os dois registros (SHA-1 via MONGODB-CR e SHA-256) são gerados juntos
- salts aleatórios: duas configurações da mesma senha diferem
- falha da fonte de aleatoriedade não altera credenciais existentes
- falha no segundo mecanismo também não altera nada (tudo ou nada)
"""

import base64

import pytest

from atlas_automation.core.exceptions import RandomSourceFailure
from atlas_automation.core.traceability.journal import MutationJournal
from atlas_automation.security.scram import MONGODB_CR, SCRAM_SHA_256, compute_scram_credentials, configure_scram_credentials


def test_configure_sets_both_mechanisms(make_user):
    user = make_user("alice", "admin")

    configure_scram_credentials(user, "pencil")

    assert user.scram_sha256_creds.iteration_count == 15000
    assert user.scram_sha1_creds.iteration_count == 10000
    assert len(base64.b64decode(user.scram_sha256_creds.salt)) == 28
    assert len(base64.b64decode(user.scram_sha1_creds.salt)) == 16


def test_configure_matches_deterministic_core(make_user, counting_random_source):
    user = make_user("alice", "admin")

    configure_scram_credentials(user, "pencil", random_source=counting_random_source)

    # SHA-256 é derivado primeiro, depois SHA-1
    assert counting_random_source.calls == [28, 16]
    salt_256 = base64.b64decode(user.scram_sha256_creds.salt)
    salt_1 = base64.b64decode(user.scram_sha1_creds.salt)
    assert user.scram_sha256_creds == compute_scram_credentials(SCRAM_SHA_256, "alice", "pencil", salt_256)
    assert user.scram_sha1_creds == compute_scram_credentials(MONGODB_CR, "alice", "pencil", salt_1)


def test_random_salts_differ_between_runs(make_user):
    a = make_user("alice", "admin")
    b = make_user("alice", "admin")

    configure_scram_credentials(a, "pencil")
    configure_scram_credentials(b, "pencil")

    assert a.scram_sha256_creds.salt != b.scram_sha256_creds.salt
    assert a.scram_sha256_creds.stored_key != b.scram_sha256_creds.stored_key


def test_random_failure_leaves_existing_credentials(make_user, failing_random_source):
    user = make_user("alice", "admin")
    configure_scram_credentials(user, "old-password")
    before = (user.scram_sha1_creds, user.scram_sha256_creds)

    with pytest.raises(RandomSourceFailure):
        configure_scram_credentials(user, "new-password", random_source=failing_random_source)

    assert (user.scram_sha1_creds, user.scram_sha256_creds) == before


def test_failure_on_second_mechanism_is_all_or_nothing(make_user):
    user = make_user("alice", "admin")
    configure_scram_credentials(user, "old-password")
    before = (user.scram_sha1_creds, user.scram_sha256_creds)

    calls = []

    def _fail_second(size):
        calls.append(size)
        if len(calls) == 2:
            raise OSError("boom")
        return b"\x01" * size

    with pytest.raises(RandomSourceFailure):
        configure_scram_credentials(user, "new-password", random_source=_fail_second)

    assert (user.scram_sha1_creds, user.scram_sha256_creds) == before


def test_journal_never_contains_the_password(make_user):
    user = make_user("alice", "admin")
    journal = MutationJournal()

    configure_scram_credentials(user, "pencil", journal=journal)

    (event,) = journal.events
    assert event["operation"] == "security.configure_scram_credentials"
    assert "pencil" not in repr(event)
