# src/atlas_automation/core/config/__init__.py

"""
Camada de configuração do core de automação.

Este pacote carrega, mescla, valida e identifica a tabela estática de
settings usada pelos mutadores (nome do automation agent, tamanho de
segredos e caminhos padrão de key-file).

Responsabilidades do pacote:
    - Carregamento de arquivos YAML/JSON (defaults + overrides locais)
    - Resolução via deep-merge determinístico
    - Validação estrutural e materialização em `EngineSettings` (frozen)
    - Fingerprint canônico para o journal de mutações

Invariantes:
    - A tabela efetiva é imutável
    - A mesma entrada sempre produz os mesmos settings

Limites explícitos:
    - Não muta o aggregate
    - Não lê variáveis de ambiente
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingsError,
    UnsupportedConfigFormatError,
)
from .loader import load_config, load_settings
from .settings import BUILTIN_DEFAULTS, DEFAULT_SETTINGS, EngineSettings

__all__ = [
    "BUILTIN_DEFAULTS",
    "ConfigError",
    "ConfigTypeConflictError",
    "DEFAULT_SETTINGS",
    "DefaultsNotFoundError",
    "EngineSettings",
    "InvalidConfigRootTypeError",
    "InvalidSettingsError",
    "UnsupportedConfigFormatError",
    "load_config",
    "load_settings",
]
