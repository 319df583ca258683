# src/flagconf/core/schema/fields.py
"""
Descritor de configuração por campo.

Os campos de um record (dataclass) podem carregar metadados que ajustam
como são nomeados e expostos no bind:

    - toml:  nome da chave no arquivo estruturado
    - flag:  nome do segmento no namespace de argumentos
    - desc:  descrição exibida na listagem de uso
    - embed: campo anônimo (filhos achatados no namespace do pai)

O valor sentinela `"-"` em `toml` ou `flag` exclui o campo, e todos os
seus descendentes, tanto do arquivo quanto dos argumentos.

Exemplo:

    @dataclass
    class Config:
        max_procs: int = setting(4, desc="maximum OS threads")
        addr: str = setting("", toml="listen", flag="addr")
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Optional

EXCLUDE = "-"

_METADATA_KEY = "flagconf"


@dataclass(frozen=True)
class FieldSpec:
    toml: Optional[str] = None
    flag: Optional[str] = None
    desc: str = ""
    embed: bool = False

    @property
    def excluded(self) -> bool:
        return self.toml == EXCLUDE or self.flag == EXCLUDE

    def flag_name(self, field_name: str) -> str:
        return self.flag or field_name.lower()

    def file_key(self, field_name: str) -> str:
        return self.toml or field_name


_EMPTY = FieldSpec()


def setting(
    default: Any = dataclasses.MISSING,
    *,
    default_factory: Callable[[], Any] | Any = dataclasses.MISSING,
    toml: Optional[str] = None,
    flag: Optional[str] = None,
    desc: str = "",
    embed: bool = False,
) -> Any:
    """Cria um `dataclasses.field` carregando um `FieldSpec` nos metadados."""
    spec = FieldSpec(toml=toml, flag=flag, desc=desc, embed=embed)
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={_METADATA_KEY: spec},
    )


def field_spec(f: dataclasses.Field) -> FieldSpec:
    return f.metadata.get(_METADATA_KEY, _EMPTY)
