# src/flagconf/core/hashing.py
"""
Snapshot e hashing canônico da configuração resolvida.

Este módulo produz uma visão plana (namespace → valor) das opções de um
record após o bind e calcula um hash determinístico dessa visão, útil
para rastrear qual configuração efetiva foi usada numa execução.

Política de hashing:
    - Serialização JSON canônica
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - SHA-256

Invariantes:
    - Configurações equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import json
import hashlib
from typing import Any, Dict

from .schema.registry import OptionRegistry


def snapshot(registry: OptionRegistry) -> Dict[str, Any]:
    """
    Lê o valor atual de cada opção registrada.

    Escalares são mantidos como estão; settables são renderizados via
    `str`, sua forma canônica em texto.
    """
    values: Dict[str, Any] = {}
    for option in registry.list():
        value = option.slot.get()
        values[option.namespace] = value if option.scalar is not None else str(value)
    return values


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico de um snapshot de configuração.

    Raises:
        TypeError: se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"flagconf: config snapshot must be a dict, got {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
