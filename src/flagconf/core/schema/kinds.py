# src/flagconf/core/schema/kinds.py
"""
Registro de kinds escalares e tipos settable.

Este módulo define o conjunto fechado de tipos escalares que podem ser
folhas de uma configuração, além do protocolo `Settable` usado como
mecanismo de extensão para tipos definidos pelo usuário.

Kinds suportados:
    - bool
    - int     (inteiro com sinal, 64 bits)
    - int64   (marcador `Int64`)
    - uint    (marcador `Uint`)
    - uint64  (marcador `Uint64`)
    - float64 (`float`)
    - string  (`str`)

Decisões arquiteturais:
    - Kinds escalares têm prioridade sobre o protocolo settable
    - Cada kind sabe converter texto de argumento e validar valor de arquivo
    - `bool` nunca é aceito onde se espera inteiro

Limites explícitos:
    - Não suporta Optional de escalar
    - Não suporta coleções genéricas (use `Strings`/`Ints` ou um settable)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Protocol, runtime_checkable


_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1


class Int64(int):
    """Marcador de anotação para inteiros de 64 bits com sinal."""


class Uint(int):
    """Marcador de anotação para inteiros sem sinal."""


class Uint64(int):
    """Marcador de anotação para inteiros sem sinal de 64 bits."""


@runtime_checkable
class Settable(Protocol):
    """
    Capacidade mínima para que um tipo arbitrário seja folha de configuração.

    Contrato:
        - `set(raw)` interpreta `raw` e altera o valor in-place;
          levanta `ValueError` para entrada malformada
        - `__str__` renderiza o valor na forma canônica em texto

    Opcionalmente o tipo pode expor `load(value)` para aceitar valores
    já decodificados do arquivo (ex.: listas TOML).
    """

    def set(self, raw: str) -> None:
        ...


# ---------------------------------------------------------------------------
# Conversores
# ---------------------------------------------------------------------------

_TRUE_LITERALS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_LITERALS = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(raw: str) -> bool:
    if raw in _TRUE_LITERALS:
        return True
    if raw in _FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean value {raw!r}")


_INT_LITERAL = re.compile(
    r"[+-]?(?:0[xX][0-9a-fA-F_]+|0[oO][0-7_]+|0[bB][01_]+|0[0-7_]*|[1-9][0-9_]*)"
)


def parse_int(raw: str) -> int:
    """
    Converte um literal inteiro com as regras de base do Go (`strconv`, base 0).

    `0x`, `0o` e `0b` selecionam a base; um `0` seguido de dígitos é octal
    (`010` vale 8). Espaços e dígitos fora da base são rejeitados.
    """
    if not _INT_LITERAL.fullmatch(raw):
        raise ValueError(f"invalid syntax {raw!r}")
    sign = -1 if raw.startswith("-") else 1
    body = raw.lstrip("+-")
    if body[:2].lower() in ("0x", "0o", "0b"):
        return sign * int(body, 0)
    if len(body) > 1 and body.startswith("0"):
        return sign * int(body, 8)
    return sign * int(body, 10)


def _ranged_int(low: int, high: int) -> Callable[[str], int]:
    def parse(raw: str) -> int:
        value = parse_int(raw)
        if not low <= value <= high:
            raise ValueError(f"value {raw!r} out of range")
        return value

    return parse


def _check_int(low: int, high: int) -> Callable[[Any], int]:
    def coerce(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected integer, got {type(value).__name__}")
        if not low <= value <= high:
            raise ValueError(f"integer {value} out of range")
        return value

    return coerce


def _check_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected boolean, got {type(value).__name__}")
    return value


def _check_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected float, got {type(value).__name__}")
    return float(value)


def _check_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class ScalarKind:
    """
    Descrição de um kind escalar suportado.

    Campos:
        - name: tag semântica exibida em uso e descrições padrão
        - parse: converte texto de argumento no valor Python
        - coerce: valida/converte valor já decodificado do arquivo
        - zero: valor zero do kind (omitido na listagem de defaults)
    """

    name: str
    parse: Callable[[str], Any]
    coerce: Callable[[Any], Any]
    zero: Any

    def render(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)


SCALAR_KINDS: Dict[type, ScalarKind] = {
    bool: ScalarKind("bool", parse_bool, _check_bool, False),
    int: ScalarKind("int", _ranged_int(_INT64_MIN, _INT64_MAX), _check_int(_INT64_MIN, _INT64_MAX), 0),
    Int64: ScalarKind("int64", _ranged_int(_INT64_MIN, _INT64_MAX), _check_int(_INT64_MIN, _INT64_MAX), 0),
    Uint: ScalarKind("uint", _ranged_int(0, _UINT64_MAX), _check_int(0, _UINT64_MAX), 0),
    Uint64: ScalarKind("uint64", _ranged_int(0, _UINT64_MAX), _check_int(0, _UINT64_MAX), 0),
    float: ScalarKind("float64", float, _check_float, 0.0),
    str: ScalarKind("string", str, _check_str, ""),
}


def scalar_kind(annotation: Any) -> Optional[ScalarKind]:
    """Retorna o kind escalar da anotação, ou None se não for escalar."""
    if isinstance(annotation, type):
        return SCALAR_KINDS.get(annotation)
    return None


def is_settable_type(annotation: Any) -> bool:
    """
    Indica se a anotação descreve um tipo settable.

    A verificação é feita sobre a classe (não sobre uma instância), pois
    o campo pode ainda estar vazio no momento do walk.
    """
    return isinstance(annotation, type) and callable(getattr(annotation, "set", None))


# ---------------------------------------------------------------------------
# Settables embutidos
# ---------------------------------------------------------------------------

class Strings(list):
    """Lista de strings settable a partir de texto separado por vírgulas."""

    def set(self, raw: str) -> None:
        self[:] = raw.split(",") if raw else []

    def load(self, value: Any) -> None:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise TypeError("expected a list of strings")
        self[:] = value

    def __str__(self) -> str:
        return ",".join(self)


class Ints(list):
    """Lista de inteiros settable a partir de texto separado por vírgulas."""

    def set(self, raw: str) -> None:
        values: Iterable[str] = raw.split(",") if raw else []
        self[:] = [parse_int(v) for v in values]

    def load(self, value: Any) -> None:
        if not isinstance(value, list) or any(
            isinstance(v, bool) or not isinstance(v, int) for v in value
        ):
            raise TypeError("expected a list of integers")
        self[:] = value

    def __str__(self) -> str:
        return ",".join(str(v) for v in self)
