# src/atlas_automation/core/config/settings.py
"""
Tabela estática de settings do engine.

As constantes de que os mutadores dependem (nome do automation agent,
tamanho dos segredos gerados e os dois caminhos padrão de key-file) vivem
em uma estrutura imutável, injetada nas operações ou referenciada via
`DEFAULT_SETTINGS`. Não existe estado global mutável.

Forma canônica (YAML):

    automation_agent:
      username: mms-automation
    secrets:
      length: 500
    key_file:
      posix: /var/lib/mongodb-mms-automation/keyfile
      windows: "%SystemDrive%\\MMSAutomation\\versions\\keyfile"

Invariantes:
    - `EngineSettings` é frozen
    - `secret_length` é um inteiro positivo (bool não é aceito)
    - Strings obrigatórias nunca são vazias
    - `BUILTIN_DEFAULTS` é somente leitura em todos os níveis
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .errors import InvalidSettingsError
from .hashing import compute_config_hash


AUTOMATION_AGENT_NAME = "mms-automation"
SECRET_LENGTH = 500
KEY_FILE_POSIX = "/var/lib/mongodb-mms-automation/keyfile"
KEY_FILE_WINDOWS = "%SystemDrive%\\MMSAutomation\\versions\\keyfile"


BUILTIN_DEFAULTS: Mapping[str, Any] = MappingProxyType({
    "automation_agent": MappingProxyType({"username": AUTOMATION_AGENT_NAME}),
    "secrets": MappingProxyType({"length": SECRET_LENGTH}),
    "key_file": MappingProxyType({
        "posix": KEY_FILE_POSIX,
        "windows": KEY_FILE_WINDOWS,
    }),
})


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = data.get(name)
    if not isinstance(value, Mapping):
        raise InvalidSettingsError(f"Seção '{name}' ausente ou não é um mapa")
    return value


def _required_str(section: Mapping[str, Any], key: str, where: str) -> str:
    value = section.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidSettingsError(f"'{where}.{key}' deve ser string não vazia")
    return value


@dataclass(frozen=True)
class EngineSettings:
    """Constantes de provisionamento usadas pela política de mecanismos."""

    automation_agent_username: str = AUTOMATION_AGENT_NAME
    secret_length: int = SECRET_LENGTH
    key_file_posix: str = KEY_FILE_POSIX
    key_file_windows: str = KEY_FILE_WINDOWS

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineSettings":
        """Constrói settings a partir da forma canônica, validando a estrutura.

        Raises:
            InvalidSettingsError: Se alguma seção ou valor obrigatório for inválido.
        """
        if not isinstance(data, Mapping):
            raise InvalidSettingsError(
                f"Settings devem ser um mapa, recebido: {type(data).__name__}"
            )

        agent = _section(data, "automation_agent")
        secrets_cfg = _section(data, "secrets")
        key_file = _section(data, "key_file")

        length = secrets_cfg.get("length")
        if isinstance(length, bool) or not isinstance(length, int) or length < 1:
            raise InvalidSettingsError(
                f"'secrets.length' deve ser inteiro positivo, recebido: {length!r}"
            )

        return cls(
            automation_agent_username=_required_str(agent, "username", "automation_agent"),
            secret_length=length,
            key_file_posix=_required_str(key_file, "posix", "key_file"),
            key_file_windows=_required_str(key_file, "windows", "key_file"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "automation_agent": {"username": self.automation_agent_username},
            "secrets": {"length": self.secret_length},
            "key_file": {
                "posix": self.key_file_posix,
                "windows": self.key_file_windows,
            },
        }

    def fingerprint(self) -> str:
        """SHA-256 da forma canônica; registrado no journal de provisionamento."""
        return compute_config_hash(self.to_dict())


DEFAULT_SETTINGS = EngineSettings.from_dict(BUILTIN_DEFAULTS)
