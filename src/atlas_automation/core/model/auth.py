"""
Bloco de autenticação do automation config.

Este módulo define os tipos que descrevem a configuração de segurança da
implantação: mecanismos habilitados, usuário do automation agent, shared
key do cluster, caminhos padrão de key-file e usuários de banco.

Campos principais do `Auth`:
    - deployment_auth_mechanisms: mecanismos habilitados (ordenados, únicos).
      Pode ser None até que um mutador o inicialize como lista vazia.
    - auto_auth_mechanisms / auto_auth_mechanism: mecanismos do agent e o
      mecanismo padrão (no máximo um; string vazia = não definido)
    - auto_user / auto_pwd: credenciais do automation agent
    - key / key_file / key_file_windows: shared key e caminhos de key-file
    - users: lista de MongoDBUser

Invariantes:
    - ScramShaCreds é imutável depois de computado
    - A identidade de um usuário é o par (username, database)

Limites explícitos:
    - Não valida unicidade de usuários na inserção
    - Não conhece formato de wire (JSON/BSON) do control plane
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ScramShaCreds:
    """Material SCRAM derivado para um mecanismo (valores em base64)."""

    iteration_count: int
    salt: str
    stored_key: str
    server_key: str


@dataclass
class Role:
    role: str
    database: str


@dataclass
class MongoDBUser:
    """Usuário de banco gerenciado pelo automation config."""

    username: str
    database: str
    roles: List[Role] = field(default_factory=list)
    mechanisms: List[str] = field(default_factory=list)
    scram_sha1_creds: Optional[ScramShaCreds] = None
    scram_sha256_creds: Optional[ScramShaCreds] = None

    def matches(self, username: str, database: str) -> bool:
        return self.username == username and self.database == database


@dataclass
class Auth:
    disabled: bool = True
    deployment_auth_mechanisms: Optional[List[str]] = None
    auto_auth_mechanisms: Optional[List[str]] = None
    auto_auth_mechanism: str = ""
    auto_user: str = ""
    auto_pwd: str = ""
    key: str = ""
    key_file: str = ""
    key_file_windows: str = ""
    users: List[MongoDBUser] = field(default_factory=list)

    def ensure_deployment_auth_mechanisms(self) -> List[str]:
        """Inicializa a lista de mecanismos quando ausente e a retorna.

        O control plane exige o campo presente mesmo quando vazio.
        """
        if self.deployment_auth_mechanisms is None:
            self.deployment_auth_mechanisms = []
        return self.deployment_auth_mechanisms

    def ensure_auto_auth_mechanisms(self) -> List[str]:
        if self.auto_auth_mechanisms is None:
            self.auto_auth_mechanisms = []
        return self.auto_auth_mechanisms
