# src/atlas_automation/core/config/errors.py
"""
Exceções canônicas da camada de configuração do core de automação.

Este módulo define a hierarquia de exceções usadas durante o carregamento,
o merge e a validação da tabela estática de settings (nome do automation
agent, tamanho de segredos, caminhos de key-file).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao operador

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de mutação do aggregate

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende dos mutadores
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do engine.

    Permite captura genérica de falhas de settings, distinta das
    exceções de mutação definidas em `core.exceptions`.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de defaults explicitamente
    informado não existe.

    Decisões arquiteturais:
        - Quando nenhum arquivo é informado, os defaults embutidos são usados
        - Um caminho informado e ausente é erro, nunca fallback silencioso
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de settings
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"secrets": {"length": 500}}
        - override: {"secrets": "curto"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingsError(ConfigError):
    """
    Exceção levantada quando a configuração resolvida não descreve
    uma tabela de settings válida.

    Exemplos:
        - `secrets.length` ausente, não inteiro ou menor que 1
        - nome do automation agent vazio
        - caminhos de key-file vazios
    """
