# src/atlas_automation/core/config/loader.py
"""
Loader canônico de settings do engine.

A tabela de settings é resolvida a partir de:
    - um arquivo de defaults (opcional; quando omitido, os defaults embutidos)
    - um arquivo local de overrides (opcional)

Responsabilidades do módulo:
    - Carregar arquivos em YAML ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Resolver a configuração final via deep-merge determinístico
    - Materializar um `EngineSettings` imutável

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - Um caminho de defaults informado e ausente é erro fatal
    - Um arquivo local ausente é ignorado

Limites explícitos:
    - Não lê variáveis de ambiente
    - Não interage com o aggregate nem com os mutadores
"""

from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .settings import DEFAULT_SETTINGS, EngineSettings
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de settings e valida sua estrutura básica.

    Decisões arquiteturais:
        - Arquivos vazios são interpretados como dicionários vazios
        - O conteúdo raiz deve ser um dicionário (`dict`)

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_config(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Resolve o dicionário de settings efetivo (defaults + local).

    Política de resolução:
        - Sem `defaults_path`, a base são os defaults embutidos
        - Com `defaults_path`, o arquivo substitui a base e é obrigatório
        - Quando presente, o local sempre tem prioridade sobre a base

    Raises:
        DefaultsNotFoundError: Se `defaults_path` for informado e não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """

    if defaults_path is None:
        effective: Dict[str, Any] = DEFAULT_SETTINGS.to_dict()
    else:
        effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective


def load_settings(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> EngineSettings:
    """
    Carrega, resolve e valida a tabela de settings do engine.

    Raises:
        ConfigError: Qualquer subclasse levantada por `load_config`.
        InvalidSettingsError: Se a configuração resolvida for semanticamente inválida.
    """
    return EngineSettings.from_dict(
        load_config(defaults_path=defaults_path, local_path=local_path)
    )
