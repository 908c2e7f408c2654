"""
Política de mecanismos de autenticação do automation config.

`enable_mechanism` habilita um conjunto de mecanismos e provisiona, de
forma idempotente, tudo o que o automation agent precisa para autenticar
na implantação:

    1. usuário do agent + senha aleatória (se ambos vazios)
    2. shared key do cluster (se vazia)
    3. caminho POSIX padrão do key-file (se vazio)
    4. caminho Windows padrão do key-file (se vazio)

Regras por mecanismo (na ordem recebida):
    - nomes fora de {MONGODB-CR, SCRAM-SHA-256} → UnsupportedMechanism; o
      processamento para no primeiro nome inválido e os nomes anteriores
      permanecem aplicados
    - autenticação é ligada (`auth.disabled = False`)
    - SCRAM-SHA-256 vira o mecanismo padrão do agent apenas se nenhum
      padrão existir (o primeiro a escrever vence)
    - o nome entra em `deployment_auth_mechanisms` e `auto_auth_mechanisms`
      se ainda não estiver presente (conjunto sobre lista ordenada)

A operação pode ser chamada repetidamente à medida que mecanismos são
adicionados; o provisionamento nunca sobrescreve valores existentes.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from atlas_automation.core.config.settings import DEFAULT_SETTINGS, EngineSettings
from atlas_automation.core.exceptions import UnsupportedMechanism
from atlas_automation.core.model import AutomationConfig
from atlas_automation.core.traceability.journal import MutationJournal, record

from .random_source import RandomSource, generate_random_ascii_string, generate_random_base64_string
from .scram import MONGODB_CR, SCRAM_SHA_256


SUPPORTED_MECHANISMS = (MONGODB_CR, SCRAM_SHA_256)


def _append_unique(items: List[str], value: str) -> bool:
    if value in items:
        return False
    items.append(value)
    return True


def _set_auto_user(config: AutomationConfig, settings: EngineSettings, random_source: Optional[RandomSource]) -> None:
    # senha gerada antes de qualquer escrita: falha não deixa usuário sem senha
    password = generate_random_ascii_string(settings.secret_length, source=random_source)
    config.auth.auto_user = settings.automation_agent_username
    config.auth.auto_pwd = password


def enable_mechanism(
    config: AutomationConfig,
    mechanisms: Sequence[str],
    *,
    settings: Optional[EngineSettings] = None,
    random_source: Optional[RandomSource] = None,
    journal: Optional[MutationJournal] = None,
) -> None:
    """
    Habilita `mechanisms` no automation config e provisiona o agent.

    Raises:
        UnsupportedMechanism: No primeiro nome fora dos mecanismos suportados.
        RandomSourceFailure: Se a geração da senha do agent ou da key falhar.
    """
    settings = settings or DEFAULT_SETTINGS
    auth = config.auth

    added: List[str] = []
    for name in mechanisms:
        if name not in SUPPORTED_MECHANISMS:
            raise UnsupportedMechanism(
                message=f"unsupported mechanism {name}",
                details={
                    "mechanism": name,
                    "supported": list(SUPPORTED_MECHANISMS),
                    "applied": added,
                },
                hint="Use MONGODB-CR ou SCRAM-SHA-256.",
            )

        auth.disabled = False
        if name == SCRAM_SHA_256 and not auth.auto_auth_mechanism:
            auth.auto_auth_mechanism = name

        if _append_unique(auth.ensure_deployment_auth_mechanisms(), name):
            added.append(name)
        _append_unique(auth.ensure_auto_auth_mechanisms(), name)

    provisioned: List[str] = []

    if not auth.auto_user and not auth.auto_pwd:
        _set_auto_user(config, settings, random_source)
        provisioned.append("auto_user")

    if not auth.key:
        auth.key = generate_random_base64_string(settings.secret_length, source=random_source)
        provisioned.append("key")

    if not auth.key_file:
        auth.key_file = settings.key_file_posix
        provisioned.append("key_file")

    if not auth.key_file_windows:
        auth.key_file_windows = settings.key_file_windows
        provisioned.append("key_file_windows")

    record(
        journal,
        operation="security.enable_mechanism",
        message=f"mecanismos habilitados: {', '.join(auth.deployment_auth_mechanisms or [])}",
        requested=list(mechanisms),
        mechanisms_added=added,
        provisioned=provisioned,
        settings_hash=settings.fingerprint(),
    )
