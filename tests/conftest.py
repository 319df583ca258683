# tests/conftest.py
"""
Fixtures compartilhados para testes do flagconf.

Este módulo define fixtures reutilizáveis que fornecem:
- arquivos de configuração temporários (TOML, YAML, JSON)
- conteúdo TOML semelhante ao uso real de um programa

Decisões arquiteturais:
    - Arquivos são sempre criados sob `tmp_path` (isolados por teste)
    - Records de teste vivem em `tests/fixtures/records.py`

Invariantes:
    - Nenhuma fixture lê `sys.argv` ou escreve fora de `tmp_path`
    - Todas as fixtures são seguras para execução em paralelo
"""

from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path):
    """
    Fixture factory que grava um arquivo de configuração temporário.

    Args (da função retornada):
        text (str): conteúdo do arquivo.
        name (str): nome do arquivo; a extensão define o formato.

    Returns:
        Callable[[str, str], str]: função que devolve o caminho gravado.
    """

    def _write(text: str, name: str = "config.toml") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def service_toml() -> str:
    """
    Fixture que fornece um TOML típico de um serviço.

    Usado por:
        - Testes de precedência entre camadas
        - Testes de records aninhados
    """

    return """\
name = "billing"

[server]
workers = 8

[server.log]
level = "debug"
"""
