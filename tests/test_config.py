"""Tests for config loading."""

import json

import pytest

from wakey.config import Config, load_config


def test_missing_file_returns_none(tmp_path):
    assert load_config(str(tmp_path / "missing.json")) is None


def test_defaults():
    cfg = Config()
    assert cfg.broadcast == "255.255.255.255"
    assert cfg.port == 9
    assert (cfg.source_ip, cfg.source_port) == ("0.0.0.0", 0)
    assert cfg.separator is None
    assert cfg.hosts == {}


def test_load_values(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "broadcast": "192.168.1.255",
        "port": 7,
        "hosts": {"nas": "AA:BB:CC:DD:EE:FF"},
    }), encoding="utf-8")

    cfg = load_config(str(path))
    assert cfg.broadcast == "192.168.1.255"
    assert cfg.port == 7
    assert cfg.source_ip == "0.0.0.0"
    assert cfg.hosts == {"nas": "AA:BB:CC:DD:EE:FF"}


def test_unknown_key(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"bogus": 1}), encoding="utf-8")
    with pytest.raises(TypeError):
        load_config(str(path))
