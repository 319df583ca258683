# src/flagconf/core/schema/registry.py
"""
Registro de opções derivadas do schema.

Este módulo define o `OptionRegistry`, responsável por armazenar os
`OptionDescriptor` produzidos pelo walker e garantir a unicidade dos
namespaces antes de qualquer leitura de arquivo ou argumento.

Cada descritor mantém um `Slot`: um handle (record dono, nome do atributo)
para o armazenamento vivo do campo. Escritas feitas através do slot
alteram o record do chamador in-place.

Decisões arquiteturais:
    - A validação de unicidade ocorre no registro, antes do bind
    - A ordem de registro (ordem de declaração dos campos) é preservada
    - O registry vive apenas durante uma chamada de bind

Invariantes:
    - Cada namespace registrado é único
    - Nenhum descritor inválido é aceito

Limites explícitos:
    - Não lê arquivos nem argumentos
    - Não converte valores
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import DuplicateOptionError
from .kinds import ScalarKind


@dataclass(frozen=True)
class Slot:
    owner: Any
    attr: str

    def get(self) -> Any:
        return getattr(self.owner, self.attr)

    def set(self, value: Any) -> None:
        setattr(self.owner, self.attr, value)


@dataclass(frozen=True)
class OptionDescriptor:
    """
    Uma folha bindável do record.

    Campos:
        - namespace: caminho pontuado único no bind
        - slot: handle para o armazenamento do campo no record
        - kind: tag semântica (`int`, `string`, ... ou nome do tipo settable)
        - description: descrição para a listagem de uso
        - default: valor presente no record no momento do walk
        - scalar: kind escalar, ou None para folhas settable
        - settable_type: classe settable, quando aplicável
    """

    namespace: str
    slot: Slot
    kind: str
    description: str
    default: Any
    scalar: Optional[ScalarKind] = None
    settable_type: Optional[type] = None

    @property
    def is_bool(self) -> bool:
        return self.scalar is not None and self.scalar.name == "bool"

    def render_default(self) -> str:
        if self.scalar is not None:
            return self.scalar.render(self.default)
        return "" if self.default is None else str(self.default)

    def is_zero_default(self) -> bool:
        if self.scalar is not None:
            return self.default == self.scalar.zero
        return self.render_default() == ""


@dataclass
class OptionRegistry:
    _options: Dict[str, OptionDescriptor] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(self, option: OptionDescriptor) -> None:
        if option.namespace in self._options:
            raise DuplicateOptionError(option.namespace)

        self._options[option.namespace] = option
        self._order.append(option.namespace)

    def get(self, namespace: str) -> OptionDescriptor:
        return self._options[namespace]

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._options

    def __len__(self) -> int:
        return len(self._order)

    def list(self) -> List[OptionDescriptor]:
        return [self._options[ns] for ns in self._order]
