# src/flagconf/core/schema/walker.py
"""
Schema walker do flagconf.

Este módulo percorre recursivamente um record (instância de dataclass) e
registra, para cada folha alcançável, um `OptionDescriptor` com namespace
pontuado canônico, valor default e descrição.

Algoritmo:
    1. Campos são visitados na ordem de declaração
    2. Campos não exportados (prefixo `_`) são ignorados
    3. O nome é o nome do campo em minúsculas, ou o override `flag`;
       o sentinela `-` exclui o campo e seus descendentes
    4. Campos `embed` não contribuem segmento de namespace e precisam ser
       records, em qualquer profundidade
    5. `Optional[Record]` vazio recebe um `Record()` novo antes da recursão
    6. Records aninhados são percorridos in-place (sem cópia)
    7. Escalares e settables viram opções registradas
    8. Qualquer outro tipo é erro de schema

Decisões arquiteturais:
    - O walker só escreve no record para alocar records aninhados ausentes
    - Valores de folha nunca são sobrescritos durante o walk
    - Tipos são resolvidos via `typing.get_type_hints`

Limites explícitos:
    - Não lê arquivos nem argumentos
    - Não valida regras de negócio
"""

from __future__ import annotations

import copy
import dataclasses
import types
from typing import Any, Dict, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from ..errors import SchemaError, UnsupportedFieldTypeError
from .fields import field_spec
from .kinds import is_settable_type, scalar_kind
from .registry import OptionDescriptor, OptionRegistry, Slot


def join_namespace(namespace: str, name: str) -> str:
    if not namespace:
        return name
    return f"{namespace}.{name}"


def is_record(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def record_type(annotation: Any) -> Optional[Tuple[type, bool]]:
    """
    Identifica anotações que descrevem um record aninhado.

    Returns:
        (classe, opcional) quando a anotação é `Record` ou `Optional[Record]`;
        None caso contrário.
    """
    if isinstance(annotation, type) and dataclasses.is_dataclass(annotation):
        return annotation, False

    if get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1 and len(get_args(annotation)) == 2:
            inner = args[0]
            if isinstance(inner, type) and dataclasses.is_dataclass(inner):
                return inner, True
    return None


def type_hints(cls: type) -> Dict[str, Any]:
    try:
        return get_type_hints(cls)
    except (NameError, TypeError) as exc:
        raise SchemaError(f"flagconf: cannot resolve field types of {cls.__name__}: {exc}") from exc


def type_name(annotation: Any) -> str:
    if isinstance(annotation, type):
        return annotation.__name__
    return repr(annotation)


def allocate(cls: type) -> Any:
    try:
        return cls()
    except TypeError as exc:
        raise SchemaError(
            f"flagconf: nested record {cls.__name__} must be constructible without arguments"
        ) from exc


def walk(
    record: Any,
    namespace: str = "",
    registry: Optional[OptionRegistry] = None,
) -> OptionRegistry:
    """
    Percorre `record` e registra todas as suas folhas bindáveis.

    Args:
        record: instância de dataclass (mutável) a ser inspecionada.
        namespace: prefixo pontuado aplicado a todas as opções.
        registry: registry existente a ser estendido (opcional).

    Returns:
        OptionRegistry: opções na ordem de declaração dos campos.

    Raises:
        UnsupportedFieldTypeError: campo de tipo não suportado.
        DuplicateOptionError: dois campos com o mesmo namespace.
        SchemaError: `record` não é um record ou tipos não resolvíveis.
    """
    if registry is None:
        registry = OptionRegistry()

    if not is_record(record):
        raise SchemaError(
            f"flagconf: config must be a dataclass instance, got {type(record).__name__}"
        )

    _walk_fields(record, namespace, registry)
    return registry


def _walk_fields(record: Any, namespace: str, registry: OptionRegistry) -> None:
    hints = type_hints(type(record))

    for f in dataclasses.fields(record):
        if f.name.startswith("_"):
            continue
        spec = field_spec(f)
        if spec.excluded:
            continue

        child_ns = namespace if spec.embed else join_namespace(namespace, spec.flag_name(f.name))
        annotation = hints.get(f.name, f.type)
        _visit(record, f.name, annotation, child_ns, spec.desc, spec.embed, registry)


def _visit(
    owner: Any,
    attr: str,
    annotation: Any,
    namespace: str,
    description: str,
    embed: bool,
    registry: OptionRegistry,
) -> None:
    nested = record_type(annotation)
    if nested is not None:
        cls, _ = nested
        value = getattr(owner, attr)
        # alocação lazy: escritas futuras precisam de destino
        if value is None:
            value = allocate(cls)
            setattr(owner, attr, value)
        _walk_fields(value, namespace, registry)
        return

    if embed or not namespace:
        raise SchemaError(f"flagconf: embedded field {attr!r} must be a record")

    slot = Slot(owner, attr)
    kind = scalar_kind(annotation)
    if kind is not None:
        registry.add(
            OptionDescriptor(
                namespace=namespace,
                slot=slot,
                kind=kind.name,
                description=description or f"({kind.name} flag, no description given)",
                default=slot.get(),
                scalar=kind,
            )
        )
        return

    if is_settable_type(annotation):
        if slot.get() is None:
            slot.set(annotation())
        registry.add(
            OptionDescriptor(
                namespace=namespace,
                slot=slot,
                kind=annotation.__name__,
                description=description or f"({annotation.__name__} flag, no description given)",
                default=copy.deepcopy(slot.get()),
                settable_type=annotation,
            )
        )
        return

    raise UnsupportedFieldTypeError(type_name(annotation), namespace)
