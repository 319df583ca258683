# tests/core/schema/test_option_registry.py
import pytest

from flagconf.core.errors import DuplicateOptionError
from flagconf.core.schema.kinds import SCALAR_KINDS
from flagconf.core.schema.registry import OptionDescriptor, OptionRegistry, Slot
from tests.fixtures.records import SimpleCase


def _option(record, namespace: str) -> OptionDescriptor:
    kind = SCALAR_KINDS[int]
    return OptionDescriptor(
        namespace=namespace,
        slot=Slot(record, "f1"),
        kind=kind.name,
        description="",
        default=record.f1,
        scalar=kind,
    )


def test_registry_preserves_registration_order():
    record = SimpleCase()
    registry = OptionRegistry()
    for ns in ("b", "a", "c"):
        registry.add(_option(record, ns))

    assert [o.namespace for o in registry.list()] == ["b", "a", "c"]
    assert len(registry) == 3
    assert "a" in registry
    assert "z" not in registry


def test_registry_rejects_duplicate_namespace():
    record = SimpleCase()
    registry = OptionRegistry()
    registry.add(_option(record, "f1"))

    with pytest.raises(DuplicateOptionError):
        registry.add(_option(record, "f1"))


def test_slot_reads_and_writes_owner_attribute():
    record = SimpleCase(f1=2)
    slot = Slot(record, "f1")
    assert slot.get() == 2
    slot.set(11)
    assert record.f1 == 11


def test_zero_default_detection():
    assert _option(SimpleCase(), "f1").is_zero_default()
    assert not _option(SimpleCase(f1=3), "f1").is_zero_default()
    assert _option(SimpleCase(f1=3), "f1").render_default() == "3"
