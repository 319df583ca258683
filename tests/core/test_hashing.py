# tests/core/test_hashing.py
"""
Testes do snapshot e do hashing canônico da configuração resolvida.

Invariantes:
    - O hash independe da ordem das chaves
    - O hash muda quando qualquer valor muda
    - Settables aparecem no snapshot em sua forma textual
"""

import pytest

from flagconf.core.hashing import compute_config_hash, snapshot
from flagconf.core.schema.walker import walk
from tests.fixtures.records import DeepCase, SliceCase


def test_hash_is_key_order_independent():
    a = {"x": 1, "y": {"z": 2}}
    b = {"y": {"z": 2}, "x": 1}
    assert compute_config_hash(a) == compute_config_hash(b)


def test_hash_is_hex_sha256():
    value = compute_config_hash({"x": 1})
    assert len(value) == 64
    int(value, 16)


def test_hash_rejects_non_dict():
    with pytest.raises(TypeError, match="config snapshot must be a dict, got list"):
        compute_config_hash([1, 2])


def test_snapshot_reads_live_values():
    config = DeepCase()
    registry = walk(config)
    before = compute_config_hash(snapshot(registry))

    config.server.workers = 3
    values = snapshot(registry)
    assert values == {"server.workers": 3, "server.log.level": "info", "name": "app"}
    assert compute_config_hash(values) != before


def test_snapshot_renders_settables():
    config = SliceCase()
    config.s.set("a,b")
    assert snapshot(walk(config)) == {"s": "a,b", "f": ""}
