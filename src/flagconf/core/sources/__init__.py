# src/flagconf/core/sources/__init__.py
"""
Fontes de valores do flagconf.

    - loader    → leitura de arquivo estruturado (TOML, YAML, JSON)
    - decoder   → aplicação do conteúdo do arquivo sobre o record
    - arguments → parsing de flags e renderização do texto de uso
"""

from .arguments import ParsedArguments, parse_arguments, render_usage
from .decoder import decode_into
from .loader import load_file

__all__ = [
    "ParsedArguments",
    "parse_arguments",
    "render_usage",
    "decode_into",
    "load_file",
]
