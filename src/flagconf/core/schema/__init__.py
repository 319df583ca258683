# src/flagconf/core/schema/__init__.py
"""
Camada de schema do flagconf.

Responsável por descrever como um record (dataclass) é exposto ao bind:
    - kinds   → escalares suportados e protocolo settable
    - fields  → metadados por campo (toml, flag, desc, embed)
    - registry → descritores de opção e unicidade de namespace
    - walker  → travessia recursiva do record

Esta camada não lê arquivos nem argumentos.
"""

from .fields import EXCLUDE, FieldSpec, field_spec, setting
from .kinds import Int64, Ints, Settable, Strings, Uint, Uint64
from .registry import OptionDescriptor, OptionRegistry, Slot
from .walker import walk

__all__ = [
    "EXCLUDE",
    "FieldSpec",
    "field_spec",
    "setting",
    "Int64",
    "Ints",
    "Settable",
    "Strings",
    "Uint",
    "Uint64",
    "OptionDescriptor",
    "OptionRegistry",
    "Slot",
    "walk",
]
