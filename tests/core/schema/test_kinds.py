# tests/core/schema/test_kinds.py
"""
Testes do registro de kinds escalares e dos settables embutidos.

Os testes asseguram que:
- cada kind converte texto de argumento segundo sua política
- valores de arquivo são validados por tipo (bool nunca é inteiro)
- limites de largura/sinal são respeitados
- `Strings` e `Ints` funcionam como settables
"""

import pytest

from flagconf.core.schema.kinds import (
    SCALAR_KINDS,
    Int64,
    Ints,
    Settable,
    Strings,
    Uint,
    Uint64,
    is_settable_type,
    parse_bool,
    parse_int,
    scalar_kind,
)


def test_scalar_kind_names():
    assert scalar_kind(bool).name == "bool"
    assert scalar_kind(int).name == "int"
    assert scalar_kind(Int64).name == "int64"
    assert scalar_kind(Uint).name == "uint"
    assert scalar_kind(Uint64).name == "uint64"
    assert scalar_kind(float).name == "float64"
    assert scalar_kind(str).name == "string"
    assert scalar_kind(list) is None
    assert scalar_kind("int") is None


@pytest.mark.parametrize("raw", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true_literals(raw):
    assert parse_bool(raw) is True


@pytest.mark.parametrize("raw", ["0", "f", "F", "FALSE", "false", "False"])
def test_parse_bool_false_literals(raw):
    assert parse_bool(raw) is False


def test_parse_bool_rejects_other_words():
    with pytest.raises(ValueError):
        parse_bool("yes")


def test_int_parse_accepts_base_prefixes_and_rejects_nan():
    kind = SCALAR_KINDS[int]
    assert kind.parse("42") == 42
    assert kind.parse("0x10") == 16
    assert kind.parse("-3") == -3
    with pytest.raises(ValueError):
        kind.parse("NaN")


@pytest.mark.parametrize(
    "raw, expected",
    [("010", 8), ("-010", -8), ("0", 0), ("0o17", 15), ("0b101", 5), ("0X1f", 31), ("1_000", 1000)],
)
def test_int_literals_follow_go_base_rules(raw, expected):
    assert parse_int(raw) == expected
    assert SCALAR_KINDS[int].parse(raw) == expected


@pytest.mark.parametrize("raw", [" 5", "5 ", "08", "", "-", "0x", "1e3"])
def test_int_literals_reject_malformed_text(raw):
    with pytest.raises(ValueError):
        parse_int(raw)


def test_ints_settable_uses_go_literals():
    values = Ints()
    values.set("010,0x10")
    assert values == [8, 16]
    with pytest.raises(ValueError):
        values.set("1, 2")


def test_unsigned_kinds_reject_negative_values():
    with pytest.raises(ValueError):
        SCALAR_KINDS[Uint].parse("-1")
    with pytest.raises(ValueError):
        SCALAR_KINDS[Uint64].coerce(-1)
    assert SCALAR_KINDS[Uint64].parse(str((1 << 64) - 1)) == (1 << 64) - 1


def test_int64_range_is_enforced():
    with pytest.raises(ValueError):
        SCALAR_KINDS[Int64].parse(str(1 << 63))


def test_float_parse_accepts_nan_literal():
    value = SCALAR_KINDS[float].parse("NaN")
    assert value != value


def test_file_coercion_is_type_checked():
    assert SCALAR_KINDS[int].coerce(3) == 3
    assert SCALAR_KINDS[float].coerce(3) == 3.0
    with pytest.raises(TypeError):
        SCALAR_KINDS[int].coerce("a")
    with pytest.raises(TypeError):
        SCALAR_KINDS[int].coerce(True)
    with pytest.raises(TypeError):
        SCALAR_KINDS[bool].coerce(1)
    with pytest.raises(TypeError):
        SCALAR_KINDS[str].coerce(5)


def test_bool_renders_lowercase():
    assert SCALAR_KINDS[bool].render(True) == "true"
    assert SCALAR_KINDS[int].render(5) == "5"


def test_strings_settable():
    values = Strings()
    values.set("a,b")
    assert values == ["a", "b"]
    assert str(values) == "a,b"
    values.set("")
    assert values == []


def test_ints_settable_rejects_garbage():
    values = Ints()
    values.set("1,2")
    assert values == [1, 2]
    assert str(values) == "1,2"
    with pytest.raises(ValueError):
        values.set("1,x")


def test_list_settables_load_decoded_sequences():
    strings, ints = Strings(), Ints()
    strings.load(["a", "b"])
    ints.load([1, 2])
    assert strings == ["a", "b"]
    assert ints == [1, 2]
    with pytest.raises(TypeError):
        ints.load(["1"])
    with pytest.raises(TypeError):
        strings.load("a")


def test_settable_detection_is_by_class():
    assert is_settable_type(Strings)
    assert is_settable_type(Ints)
    assert not is_settable_type(int)
    assert not is_settable_type(Strings())
    assert isinstance(Strings(), Settable)
