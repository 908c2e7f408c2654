"""
Derivação de credenciais SCRAM para usuários do automation config.

Este módulo produz o material que o banco usa para verificar a senha de um
usuário sem armazená-la: salt, stored key e server key, por mecanismo.

Mecanismos suportados (v1):

    | mecanismo      | hash    | iterações | salt (bytes)       |
    |----------------|---------|-----------|--------------------|
    | MONGODB-CR     | SHA-1   | 10000     | 16 (digest - 4)    |
    | SCRAM-SHA-256  | SHA-256 | 15000     | 28 (digest - 4)    |

`MONGODB-CR` gera as credenciais SCRAM-SHA-1 do usuário. Esse mecanismo
exige um passo extra antes da derivação: a senha é substituída pelo hex MD5
de "<username>:mongo:<password>". O handshake do servidor depende disso; o
passo não é opcional.

Derivação (RFC 5802 / RFC 7677):

    SaltedPassword = Hi(password, salt, i)        # PBKDF2-HMAC, dkLen = digest
    ClientKey      = HMAC(SaltedPassword, "Client Key")
    StoredKey      = H(ClientKey)
    ServerKey      = HMAC(SaltedPassword, "Server Key")

Decisões arquiteturais:
    - Salt, stored key e server key são codificados em base64 padrão
    - `configure_scram_credentials` calcula os dois registros antes de
      escrever qualquer campo no usuário
    - `compute_scram_credentials` é determinística para um salt fixo

Limites explícitos:
    - Não conversa com o servidor (sem client/server proof)
    - Não valida força de senha
"""

from __future__ import annotations

import base64
import hashlib
import hmac
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from atlas_automation.core.exceptions import InternalInvariantViolation
from atlas_automation.core.model import MongoDBUser, ScramShaCreds
from atlas_automation.core.traceability.journal import MutationJournal, record

from .random_source import RandomSource, generate_random_bytes


MONGODB_CR = "MONGODB-CR"
SCRAM_SHA_256 = "SCRAM-SHA-256"

RFC5802_MANDATED_SALT_SIZE = 4


@dataclass(frozen=True)
class ScramMechanism:
    """Parâmetros fixos de derivação de um mecanismo."""

    name: str
    hash_name: str
    iterations: int
    prehash_password: bool = False

    @property
    def digest_size(self) -> int:
        return hashlib.new(self.hash_name).digest_size

    @property
    def salt_size(self) -> int:
        return self.digest_size - RFC5802_MANDATED_SALT_SIZE


MECHANISMS: Mapping[str, ScramMechanism] = MappingProxyType(
    {
        MONGODB_CR: ScramMechanism(MONGODB_CR, "sha1", 10000, prehash_password=True),
        SCRAM_SHA_256: ScramMechanism(SCRAM_SHA_256, "sha256", 15000),
    }
)


def md5_hex(text: str) -> str:
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def _mechanism(name: str) -> ScramMechanism:
    params = MECHANISMS.get(name)
    if params is None:
        raise InternalInvariantViolation(
            message=f"unrecognized SCRAM-SHA format {name}",
            details={"mechanism": name, "supported": sorted(MECHANISMS)},
        )
    return params


def generate_salt(mechanism: str, *, random_source: Optional[RandomSource] = None) -> bytes:
    return generate_random_bytes(_mechanism(mechanism).salt_size, source=random_source)


def _derive(params: ScramMechanism, password: str, base64_salt: str) -> ScramShaCreds:
    salt = base64.b64decode(base64_salt)
    salted_password = hashlib.pbkdf2_hmac(
        params.hash_name,
        password.encode("utf-8"),
        salt,
        params.iterations,
        dklen=params.digest_size,
    )
    client_key = hmac.new(salted_password, b"Client Key", params.hash_name).digest()
    server_key = hmac.new(salted_password, b"Server Key", params.hash_name).digest()
    stored_key = hashlib.new(params.hash_name, client_key).digest()

    return ScramShaCreds(
        iteration_count=params.iterations,
        salt=base64_salt,
        stored_key=base64.b64encode(stored_key).decode("ascii"),
        server_key=base64.b64encode(server_key).decode("ascii"),
    )


def compute_scram_credentials(mechanism: str, username: str, password: str, salt: bytes) -> ScramShaCreds:
    """
    Deriva o registro SCRAM de `mechanism` para um salt já gerado.

    Raises:
        InternalInvariantViolation: Se `mechanism` não estiver em MECHANISMS.
    """
    params = _mechanism(mechanism)
    if params.prehash_password:
        password = md5_hex(f"{username}:mongo:{password}")
    return _derive(params, password, base64.b64encode(salt).decode("ascii"))


def new_scram_creds(
    user: MongoDBUser,
    password: str,
    mechanism: str,
    *,
    random_source: Optional[RandomSource] = None,
) -> ScramShaCreds:
    salt = generate_salt(mechanism, random_source=random_source)
    return compute_scram_credentials(mechanism, user.username, password, salt)


def configure_scram_credentials(
    user: MongoDBUser,
    password: str,
    *,
    random_source: Optional[RandomSource] = None,
    journal: Optional[MutationJournal] = None,
) -> None:
    """
    Gera credenciais SCRAM-SHA-256 e SCRAM-SHA-1 (via MONGODB-CR) para `user`.

    Os dois mecanismos são sempre derivados juntos, garantindo que uma troca
    de senha mantenha ambos verificáveis. Nenhum campo do usuário é
    alterado se qualquer derivação falhar.

    Raises:
        RandomSourceFailure: Se a geração de salt falhar.
    """
    scram256_creds = new_scram_creds(user, password, SCRAM_SHA_256, random_source=random_source)
    scram1_creds = new_scram_creds(user, password, MONGODB_CR, random_source=random_source)

    user.scram_sha256_creds = scram256_creds
    user.scram_sha1_creds = scram1_creds

    record(
        journal,
        operation="security.configure_scram_credentials",
        message=f"credenciais SCRAM geradas para '{user.username}'",
        username=user.username,
        database=user.database,
    )
