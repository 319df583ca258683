# src/flagconf/core/sources/decoder.py
"""
Decoder de mapeamentos para records.

Este módulo aplica o conteúdo de um arquivo estruturado (já carregado
como dicionário) diretamente sobre um record, in-place.

Política de correspondência de chaves (por campo):
    - a chave do campo é o override `toml`, ou o próprio nome do campo
    - correspondência exata é preferida
    - em seguida, correspondência case-insensitive é aceita
    - chaves do arquivo sem campo correspondente são ignoradas

Decisões arquiteturais:
    - Seções aninhadas correspondem a records aninhados
    - Campos `embed` leem suas chaves do mapeamento do pai
    - Tipos incompatíveis são erro fatal (`FileTypeMismatchError`)
    - O decode não é transacional: escritas anteriores a um erro permanecem

Limites explícitos:
    - Não lê o disco (ver `loader`)
    - Não desfaz escritas parciais
"""

from __future__ import annotations

import dataclasses
from typing import Any, List, Mapping, Optional

from ..errors import FileTypeMismatchError, UnsupportedFieldTypeError
from ..schema.fields import field_spec
from ..schema.kinds import is_settable_type, scalar_kind
from ..schema.walker import allocate, join_namespace, record_type, type_hints, type_name


def match_key(data: Mapping[str, Any], key: str) -> Optional[str]:
    if key in data:
        return key
    lowered = key.lower()
    for candidate in data:
        if isinstance(candidate, str) and candidate.lower() == lowered:
            return candidate
    return None


def decode_into(
    record: Any,
    data: Mapping[str, Any],
    *,
    namespace: str = "",
    path: Optional[str] = None,
) -> List[str]:
    """
    Escreve `data` em `record` e retorna os namespaces das folhas escritas.

    Raises:
        FileTypeMismatchError: valor incompatível com o tipo do campo.
    """
    written: List[str] = []
    _decode_record(record, data, namespace, "", path, written)
    return written


def _decode_record(
    record: Any,
    data: Mapping[str, Any],
    namespace: str,
    key_prefix: str,
    path: Optional[str],
    written: List[str],
) -> None:
    hints = type_hints(type(record))

    for f in dataclasses.fields(record):
        if f.name.startswith("_"):
            continue
        spec = field_spec(f)
        if spec.excluded:
            continue

        child_ns = namespace if spec.embed else join_namespace(namespace, spec.flag_name(f.name))
        annotation = hints.get(f.name, f.type)
        nested = record_type(annotation)

        if nested is not None and spec.embed:
            target = _ensure_record(record, f.name, nested[0])
            _decode_record(target, data, child_ns, key_prefix, path, written)
            continue

        key = match_key(data, spec.file_key(f.name))
        if key is None:
            continue
        value = data[key]
        key_path = join_namespace(key_prefix, key)

        if nested is not None:
            if not isinstance(value, dict):
                raise FileTypeMismatchError(
                    f"flagconf: {key_path}: expected a table, got {type(value).__name__}",
                    path=path,
                    key=key_path,
                )
            target = _ensure_record(record, f.name, nested[0])
            _decode_record(target, value, child_ns, key_path, path, written)
            continue

        _decode_leaf(record, f.name, annotation, value, key_path, path)
        written.append(child_ns)


def _ensure_record(owner: Any, attr: str, cls: type) -> Any:
    value = getattr(owner, attr)
    if value is None:
        value = allocate(cls)
        setattr(owner, attr, value)
    return value


def _decode_leaf(
    owner: Any,
    attr: str,
    annotation: Any,
    value: Any,
    key_path: str,
    path: Optional[str],
) -> None:
    kind = scalar_kind(annotation)
    try:
        if kind is not None:
            setattr(owner, attr, kind.coerce(value))
            return

        if is_settable_type(annotation):
            current = getattr(owner, attr)
            if current is None:
                current = annotation()
                setattr(owner, attr, current)
            if isinstance(value, str):
                current.set(value)
            elif callable(getattr(current, "load", None)):
                current.load(value)
            else:
                raise TypeError(f"expected string, got {type(value).__name__}")
            return
    except (TypeError, ValueError) as exc:
        raise FileTypeMismatchError(
            f"flagconf: {key_path}: {exc}", path=path, key=key_path
        ) from exc

    raise UnsupportedFieldTypeError(type_name(annotation), key_path)
