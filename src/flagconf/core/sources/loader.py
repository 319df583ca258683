# src/flagconf/core/sources/loader.py
"""
Loader de arquivos estruturados do flagconf.

Este módulo lê um arquivo de configuração do disco e o entrega como um
dicionário puro, pronto para ser decodificado dentro de um record.

Formatos suportados:
    - TOML (.toml)
    - YAML (.yaml, .yml)
    - JSON (.json)

Decisões arquiteturais:
    - O formato é escolhido pela extensão, nunca pelo conteúdo
    - Arquivos vazios são interpretados como dicionários vazios
    - O conteúdo raiz deve ser um dicionário
    - Só a ausência do caminho conta como "arquivo não encontrado"; um caminho
      existente e ilegível é um erro de arquivo comum

Limites explícitos:
    - Não escreve no record (ver `decoder`)
    - Não aplica defaults
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict

import yaml  # PyYAML

from ..errors import (
    ConfigFileNotFoundError,
    FileError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)

SUPPORTED_SUFFIXES = (".toml", ".yaml", ".yml", ".json")


def load_file(path: str | Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida sua estrutura básica.

    Args:
        path: caminho do arquivo.

    Returns:
        Dict[str, Any]: conteúdo do arquivo como dicionário.

    Raises:
        ConfigFileNotFoundError: se nada existir no caminho.
        UnsupportedConfigFormatError: se a extensão não for suportada.
        InvalidConfigRootTypeError: se o conteúdo raiz não for um dicionário.
        FileError: se o conteúdo for sintaticamente inválido ou o caminho
            existir mas não puder ser lido (diretório, permissão).
    """
    file = Path(path)
    if not file.exists():
        raise ConfigFileNotFoundError(str(file))

    suffix = file.suffix.lower()

    try:
        if suffix == ".toml":
            with file.open("rb") as f:
                data = tomllib.load(f)

        elif suffix in {".yaml", ".yml"}:
            with file.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)

        elif suffix == ".json":
            text = file.read_text(encoding="utf-8")
            data = json.loads(text) if text.strip() else None

        else:
            raise UnsupportedConfigFormatError(
                f"flagconf: unsupported config format: {file.suffix or '(none)'}", path=str(file)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise FileError(f"flagconf: malformed config file {file}: {exc}", path=str(file)) from exc
    except OSError as exc:
        raise FileError(f"flagconf: cannot read config file {file}: {exc}", path=str(file)) from exc

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"flagconf: config root must be a mapping, got {type(data).__name__}", path=str(file)
        )

    return data
