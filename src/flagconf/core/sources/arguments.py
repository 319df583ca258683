# src/flagconf/core/sources/arguments.py
"""
Parser de argumentos de linha de comando do flagconf.

Este módulo interpreta uma lista de tokens no estilo de flags contra as
opções registradas pelo walker e escreve os valores no record através
dos slots de cada opção.

Gramática aceita:
    - `-name=value` e `--name=value`
    - `-name value` e `--name value` (não-bool)
    - `-name` para opções bool (equivale a `-name=true`)
    - `--` encerra o parsing; o primeiro token que não é flag também
    - `-h`, `-help` e `--help` pedem o texto de uso

Decisões arquiteturais:
    - Todos os tokens são convertidos antes de qualquer escrita
    - Se um token falha, nenhum argumento é aplicado ao record
    - Settables são convertidos sobre uma cópia profunda do valor atual
    - O texto de uso é devolvido como dado, nunca impresso

Limites explícitos:
    - Não lê `sys.argv` (ver `binder.parse`)
    - Não escreve em stdout/stderr
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..errors import ArgumentError, HelpRequested
from ..schema.registry import OptionDescriptor, OptionRegistry

HELP_FLAGS = ("h", "help")

# nomes de tipo exibidos no uso; settables aparecem como "value"
USAGE_TYPE_NAMES = {
    "int": "int",
    "int64": "int",
    "uint": "uint",
    "uint64": "uint",
    "float64": "float",
    "string": "string",
}


@dataclass
class ParsedArguments:
    assignments: List[Tuple[OptionDescriptor, Any]] = field(default_factory=list)
    positional: List[str] = field(default_factory=list)

    def apply(self) -> List[str]:
        """Escreve as atribuições no record e retorna os namespaces tocados."""
        touched: List[str] = []
        for option, value in self.assignments:
            option.slot.set(value)
            if option.namespace not in touched:
                touched.append(option.namespace)
        return touched


def render_usage(program: str, registry: OptionRegistry) -> str:
    """
    Renderiza a listagem de uso de todas as opções registradas.

    Cada opção mostra namespace, nome de tipo (omitido para bool), descrição
    e o default quando este difere do valor zero do kind. Os nomes de tipo
    seguem o `flag` do Go: larguras somem (`int64` vira `int`, `uint64` vira
    `uint`), `float64` vira `float` e settables aparecem como `value`.
    """
    lines = [f"Usage of {program}:"]
    for option in sorted(registry.list(), key=lambda o: o.namespace):
        header = f"  -{option.namespace}"
        if not option.is_bool:
            type_name = USAGE_TYPE_NAMES[option.kind] if option.scalar is not None else "value"
            header += f" {type_name}"
        lines.append(header)

        text = f"    \t{option.description}"
        if not option.is_zero_default():
            default = option.render_default()
            if option.kind == "string":
                default = f'"{default}"'
            text += f" (default {default})"
        lines.append(text)
    return "\n".join(lines) + "\n"


def parse_arguments(program: str, args: List[str], registry: OptionRegistry) -> ParsedArguments:
    """
    Converte `args` (sem o nome do programa) em atribuições pendentes.

    Args:
        program: identidade do programa, usada apenas no texto de uso.
        args: tokens após `argv[0]`.
        registry: opções registradas pelo walker.

    Returns:
        ParsedArguments: atribuições na ordem dos tokens e argumentos
        posicionais restantes. Nada é escrito no record até `apply()`.

    Raises:
        HelpRequested: token de ajuda não registrado como opção.
        ArgumentError: flag desconhecida, sintaxe inválida, valor ausente
            ou valor não conversível.
    """
    parsed = ParsedArguments()
    scratch: Dict[str, Any] = {}

    def fail(message: str, option: str | None = None) -> ArgumentError:
        return ArgumentError(message, usage=render_usage(program, registry), option=option)

    i = 0
    while i < len(args):
        token = args[i]
        if len(token) < 2 or token[0] != "-":
            break

        dashes = 1
        if token[1] == "-":
            dashes = 2
            if len(token) == 2:
                i += 1
                break

        name = token[dashes:]
        if not name or name[0] in "-=":
            raise fail(f"bad flag syntax: {token}")
        i += 1

        has_value = "=" in name
        value = ""
        if has_value:
            name, value = name.split("=", 1)

        if name not in registry:
            if name in HELP_FLAGS:
                raise HelpRequested(render_usage(program, registry))
            raise fail(f"flag provided but not defined: -{name}", name)
        option = registry.get(name)

        if option.is_bool and not has_value:
            parsed.assignments.append((option, True))
            continue

        if not has_value:
            if i >= len(args):
                raise fail(f"flag needs an argument: -{name}", name)
            value = args[i]
            i += 1

        try:
            converted = _convert(option, value, scratch)
        except ValueError as exc:
            raise fail(f"invalid value {value!r} for flag -{name}: {exc}", name) from exc
        parsed.assignments.append((option, converted))

    parsed.positional = list(args[i:])
    return parsed


def _convert(option: OptionDescriptor, raw: str, scratch: Dict[str, Any]) -> Any:
    if option.scalar is not None:
        return option.scalar.parse(raw)

    # settable: a cópia isola o record até que todos os tokens sejam válidos
    target = scratch.get(option.namespace)
    if target is None:
        current = option.slot.get()
        target = copy.deepcopy(current) if current is not None else option.settable_type()
        scratch[option.namespace] = target
    target.set(raw)
    return target
