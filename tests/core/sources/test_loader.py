# tests/core/sources/test_loader.py
"""
Testes do loader de arquivos estruturados.

Os testes asseguram que:
- TOML, YAML e JSON são lidos como dicionários equivalentes
- arquivos vazios são dicionários vazios
- ausência do arquivo é sinalizada com `missing=True`
- formatos desconhecidos, conteúdo malformado e raiz não-mapa são rejeitados

Limites explícitos:
    - Não valida aplicação do conteúdo sobre records (ver decoder)
"""

import pytest

from flagconf.core.errors import (
    ConfigFileNotFoundError,
    FileError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from flagconf.core.sources.loader import load_file


def test_formats_load_equivalent_content(write_config):
    expected = {"f1": 3, "s1": {"name": "x"}}

    toml_path = write_config('f1 = 3\n[s1]\nname = "x"\n', "c.toml")
    yaml_path = write_config("f1: 3\ns1:\n  name: x\n", "c.yaml")
    yml_path = write_config("f1: 3\ns1:\n  name: x\n", "c.yml")
    json_path = write_config('{"f1": 3, "s1": {"name": "x"}}', "c.json")

    for path in (toml_path, yaml_path, yml_path, json_path):
        assert load_file(path) == expected


@pytest.mark.parametrize("name", ["empty.toml", "empty.yaml", "empty.json"])
def test_empty_files_are_empty_mappings(write_config, name):
    assert load_file(write_config("", name)) == {}


def test_missing_file_is_flagged(tmp_path):
    missing = tmp_path / "nope.toml"
    with pytest.raises(ConfigFileNotFoundError) as exc:
        load_file(missing)
    assert exc.value.missing is True
    assert isinstance(exc.value, FileError)


@pytest.mark.parametrize("name", ["conf.toml", "conf.json", "conf"])
def test_existing_unreadable_path_is_not_missing(tmp_path, name):
    directory = tmp_path / name
    directory.mkdir()
    with pytest.raises(FileError) as exc:
        load_file(directory)
    assert not isinstance(exc.value, ConfigFileNotFoundError)
    assert exc.value.missing is False


def test_unsupported_suffix_is_rejected(write_config):
    with pytest.raises(UnsupportedConfigFormatError) as exc:
        load_file(write_config("f1 = 3", "config.ini"))
    assert exc.value.missing is False


@pytest.mark.parametrize(
    "text,name",
    [
        ("f1 = = 3", "bad.toml"),
        ("f1: [1, 2", "bad.yaml"),
        ("{not json", "bad.json"),
    ],
)
def test_malformed_content_is_file_error(write_config, text, name):
    with pytest.raises(FileError) as exc:
        load_file(write_config(text, name))
    assert exc.value.missing is False


def test_non_mapping_root_is_rejected(write_config):
    with pytest.raises(InvalidConfigRootTypeError):
        load_file(write_config("- a\n- b\n", "list.yaml"))
