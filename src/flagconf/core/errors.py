# src/flagconf/core/errors.py
"""
Exceções canônicas do flagconf.

Este módulo define a hierarquia oficial de exceções levantadas durante o
bind de uma configuração: inspeção do schema, leitura do arquivo
estruturado e parsing dos argumentos de linha de comando.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Cada camada (schema, arquivo, argumentos) possui sua própria família
    - Nenhuma exceção imprime, loga ou encerra o processo

Invariantes:
    - Todas as exceções herdam de `FlagconfError`
    - `ArgumentError` e `HelpRequested` carregam o texto de uso como dado
    - Pedido de ajuda nunca é confundido com erro de argumento

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não formata mensagens para terminal

Este módulo existe para que chamadores possam distinguir,
de forma previsível, a origem de cada falha de bind.
"""

from __future__ import annotations

from typing import Optional


class FlagconfError(Exception):
    """
    Exceção base para todos os erros do flagconf.

    Permite captura genérica de qualquer falha de bind sem capturar
    erros de programação não relacionados (ex.: `KeyError` interno).
    """


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

class SchemaError(FlagconfError):
    """
    Exceção levantada quando o formato do record não é suportado.

    Representa um erro de programação (tempo de definição do schema),
    não uma condição de runtime. Nunca deve ser re-tentado.
    """


class UnsupportedFieldTypeError(SchemaError):
    """Campo cujo tipo não é escalar suportado nem settable."""

    def __init__(self, type_name: str, namespace: str) -> None:
        super().__init__(f"flagconf: unhandled type: {type_name} (option {namespace!r})")
        self.type_name = type_name
        self.namespace = namespace


class DuplicateOptionError(SchemaError):
    """
    Dois campos produziram o mesmo namespace.

    Decisões arquiteturais:
        - Colisões são detectadas no registro, antes de qualquer leitura
        - Nenhuma opção é renomeada automaticamente
    """

    def __init__(self, namespace: str) -> None:
        super().__init__(f"flagconf: duplicate option name: {namespace}")
        self.namespace = namespace


class BindUsageError(SchemaError):
    """Pré-condição de chamada violada (argv vazio, record inválido)."""


# ---------------------------------------------------------------------------
# Arquivo estruturado
# ---------------------------------------------------------------------------

class FileError(FlagconfError):
    """
    Exceção levantada quando a camada de arquivo não pode ser aplicada.

    Cobre tanto a ausência do arquivo quanto conteúdo malformado ou com
    tipos incompatíveis com o record.

    Decisões arquiteturais:
        - A ausência do arquivo é sinalizada via `missing=True`
        - Erros de decode interrompem o bind antes dos argumentos
        - Escritas parciais já feitas no record não são desfeitas

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
        - Não realiza coerção de tipos além da política de cada kind
    """

    def __init__(self, message: str, *, path: Optional[str] = None, missing: bool = False) -> None:
        super().__init__(message)
        self.path = path
        self.missing = missing


class ConfigFileNotFoundError(FileError):
    """Nenhum arquivo existe no caminho informado."""

    def __init__(self, path: str) -> None:
        super().__init__(f"flagconf: config file not found: {path}", path=path, missing=True)


class UnsupportedConfigFormatError(FileError):
    """
    Extensão de arquivo sem decoder associado.

    Formatos suportados:
        - TOML (.toml)
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(FileError):
    """O conteúdo raiz do arquivo não é um mapa chave-valor."""


class FileTypeMismatchError(FileError):
    """Valor do arquivo incompatível com o tipo do campo de destino."""

    def __init__(self, message: str, *, path: Optional[str] = None, key: str = "") -> None:
        super().__init__(message, path=path)
        self.key = key


# ---------------------------------------------------------------------------
# Argumentos
# ---------------------------------------------------------------------------

class ArgumentError(FlagconfError):
    """
    Exceção levantada quando a lista de argumentos não pode ser aplicada.

    Carrega a listagem de uso renderizada (`usage`) para que o chamador
    decida se e onde exibi-la. Nenhum argumento é aplicado ao record
    quando esta exceção é levantada.
    """

    def __init__(self, message: str, *, usage: str = "", option: Optional[str] = None) -> None:
        super().__init__(message)
        self.usage = usage
        self.option = option


class HelpRequested(FlagconfError):
    """
    O usuário pediu explicitamente o texto de uso (`-h`, `-help`, `--help`).

    Não representa configuração inválida: chamadores normalmente exibem
    `usage` e encerram com sucesso.
    """

    def __init__(self, usage: str = "") -> None:
        super().__init__("flag: help requested")
        self.usage = usage
