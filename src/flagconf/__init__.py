# src/flagconf/__init__.py
"""
flagconf — configuração de programas a partir de arquivo e flags.

Combina um arquivo estruturado (TOML, YAML ou JSON) com argumentos de
linha de comando sobre um record (dataclass) populado com defaults.
Valores do arquivo sobrescrevem os defaults e flags sobrescrevem o arquivo.

Uso típico:

    from dataclasses import dataclass
    import flagconf

    @dataclass
    class Config:
        max_procs: int = flagconf.setting(4, desc="maximum OS threads")
        addr: str = flagconf.setting("", desc="listen address (with port)")

    config = Config()
    flagconf.must_parse("config.toml", config)

Nomes:
    - no arquivo, a chave é o nome do campo (exato, depois case-insensitive),
      ou o override `toml`
    - nas flags, o nome é o nome do campo em minúsculas, ou o override `flag`
    - records aninhados viram seções no arquivo e `-secao.campo` nas flags
"""

from .core.binder import BindReport, bind, is_help, must_parse, parse
from .core.errors import (
    ArgumentError,
    ConfigFileNotFoundError,
    FileError,
    FlagconfError,
    HelpRequested,
    SchemaError,
)
from .core.schema import Int64, Ints, Settable, Strings, Uint, Uint64, setting

__all__ = [
    "BindReport",
    "bind",
    "is_help",
    "must_parse",
    "parse",
    "ArgumentError",
    "ConfigFileNotFoundError",
    "FileError",
    "FlagconfError",
    "HelpRequested",
    "SchemaError",
    "Int64",
    "Ints",
    "Settable",
    "Strings",
    "Uint",
    "Uint64",
    "setting",
]
