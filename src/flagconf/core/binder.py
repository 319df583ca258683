# src/flagconf/core/binder.py
"""
Binder em camadas do flagconf.

Este módulo orquestra as duas fontes de valores sobre as opções
registradas pelo walker, sempre escrevendo in-place no record do chamador.

Ordem de aplicação (última escrita vence, por folha):
    1. default   → valor já presente no record
    2. arquivo   → arquivo estruturado em `path`
    3. argumentos → tokens de `argv[1:]`

Decisões arquiteturais:
    - Cada etapa pode abortar o bind inteiro
    - Erro de arquivo interrompe antes de qualquer argumento
    - Não há rollback entre camadas: se os argumentos falham, as escritas
      do arquivo permanecem no record
    - O core nunca imprime nem encerra o processo; apenas `must_parse`,
      opt-in, escreve no sink de erro e chama `SystemExit`

Invariantes:
    - Opções são descartadas ao final do bind
    - Nenhum estado global é lido além de `sys.argv`/`sys.stderr` nos wrappers

Limites explícitos:
    - Não valida regras de negócio
    - Não suporta recarga a quente
    - Não suporta fontes além de arquivo e argumentos
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, TextIO

from .errors import (
    BindUsageError,
    ConfigFileNotFoundError,
    FlagconfError,
    HelpRequested,
)
from .hashing import compute_config_hash, snapshot
from .schema.walker import is_record, walk
from .sources.arguments import parse_arguments
from .sources.decoder import decode_into
from .sources.loader import load_file

LAYER_DEFAULT = "default"
LAYER_FILE = "file"
LAYER_ARGUMENTS = "arguments"


@dataclass
class BindReport:
    """
    Resultado de uma chamada de bind bem-sucedida.

    Campos:
        - program: identidade do programa (`argv[0]`)
        - path: caminho do arquivo estruturado
        - options: namespaces registrados, na ordem de declaração
        - origins: camada que escreveu por último cada folha
        - positional: tokens restantes após o fim das flags
        - config_hash: hash SHA-256 do snapshot final
        - events: log estruturado do bind

    O record em si continua sendo a fonte dos valores; o relatório
    apenas descreve como eles foram resolvidos.
    """

    program: str
    path: str
    options: List[str] = field(default_factory=list)
    origins: Dict[str, str] = field(default_factory=dict)
    positional: List[str] = field(default_factory=list)
    config_hash: Optional[str] = None
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "program": self.program,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def mark(self, namespaces: Sequence[str], layer: str) -> None:
        for ns in namespaces:
            if ns in self.origins:
                self.origins[ns] = layer


def bind(
    argv: Sequence[str],
    path: str | Path,
    record: Any,
    allow_missing_file: bool = False,
) -> BindReport:
    """
    Aplica arquivo e argumentos sobre `record`, in-place.

    Args:
        argv: sequência no formato de `sys.argv`; `argv[0]` é o programa.
        path: caminho do arquivo estruturado (TOML, YAML ou JSON).
        record: instância de dataclass populada com os defaults.
        allow_missing_file: se True, a ausência do arquivo não é erro.

    Returns:
        BindReport: descrição de como cada folha foi resolvida.

    Raises:
        SchemaError: record não suportado ou pré-condição violada.
        FileError: arquivo ausente (quando não permitido), malformado ou
            com tipos incompatíveis.
        ArgumentError: argumento inválido; carrega o texto de uso.
        HelpRequested: pedido explícito de ajuda.
    """
    if len(argv) < 1:
        raise BindUsageError("flagconf: bind called with empty args")
    if not is_record(record):
        raise BindUsageError("flagconf: config must be a dataclass instance")

    program = argv[0]
    report = BindReport(program=program, path=str(path))

    registry = walk(record)
    report.options = [option.namespace for option in registry.list()]
    report.origins = {ns: LAYER_DEFAULT for ns in report.options}
    report.log(level="DEBUG", message="walk.done", options=len(registry))

    try:
        data = load_file(path)
    except ConfigFileNotFoundError:
        if not allow_missing_file:
            raise
        report.log(level="INFO", message="file.missing", path=str(path))
    else:
        written = decode_into(record, data, path=str(path))
        report.mark(written, LAYER_FILE)
        report.log(level="INFO", message="file.loaded", path=str(path), written=len(written))

    parsed = parse_arguments(program, list(argv[1:]), registry)
    touched = parsed.apply()
    report.mark(touched, LAYER_ARGUMENTS)
    report.positional = parsed.positional
    report.log(level="INFO", message="arguments.applied", applied=len(touched))

    report.config_hash = compute_config_hash(snapshot(registry))
    return report


def parse(path: str | Path, record: Any) -> BindReport:
    """
    Atalho para chamadores simples: usa `sys.argv` e exige o arquivo.

    Exemplo:

        @dataclass
        class Config:
            max_procs: int = setting(4, desc="maximum OS threads")
            addr: str = setting("", desc="listen address (with port)")

        config = Config()
        flagconf.parse("config.toml", config)

    Com `max_procs = 8` no arquivo e `-addr :8888` na linha de comando,
    `config` termina com `max_procs == 8` e `addr == ":8888"`.
    """
    return bind(sys.argv, path, record, allow_missing_file=False)


def must_parse(
    path: str | Path,
    record: Any,
    *,
    argv: Optional[Sequence[str]] = None,
    stderr: Optional[TextIO] = None,
) -> BindReport:
    """
    Como `parse`, mas encerra o processo em caso de falha.

    Pedido de ajuda escreve o uso no sink e encerra com status 0; demais
    falhas escrevem a mensagem (e o uso, quando disponível) e encerram
    com status 2.
    """
    argv = sys.argv if argv is None else argv
    sink = sys.stderr if stderr is None else stderr

    try:
        return bind(argv, path, record, allow_missing_file=False)
    except HelpRequested as exc:
        sink.write(exc.usage)
        raise SystemExit(0) from exc
    except FlagconfError as exc:
        program = argv[0] if argv else "flagconf"
        sink.write(f"{program}: {exc}\n")
        usage = getattr(exc, "usage", "")
        if usage:
            sink.write(usage)
        raise SystemExit(2) from exc


def is_help(err: Optional[BaseException]) -> bool:
    """Indica se `err` (ou alguma causa encadeada) é um pedido de ajuda."""
    seen = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, HelpRequested):
            return True
        seen.add(id(err))
        err = err.__cause__ or err.__context__
    return False
