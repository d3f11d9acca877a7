from __future__ import annotations

"""
Unit tests for Configuration Domain Management.

Verifies defaults and JSON loading with fallbacks.
"""

import json

from shelltree.domain.config import get_default_config, load_config


def test_default_config_values():
    cfg = get_default_config()
    assert cfg == {
        "ceiling": 100000,
        "capacity": 70000000,
        "headroom": 30000000,
        "max_depth": 256,
    }


def test_default_config_is_a_fresh_copy():
    cfg = get_default_config()
    cfg["ceiling"] = 1
    assert get_default_config()["ceiling"] == 100000


def test_load_config_missing_file_returns_defaults(tmp_path):
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_load_config_merges_known_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"ceiling": 500, "unknown": True}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["ceiling"] == 500
    assert cfg["capacity"] == 70000000
    assert "unknown" not in cfg


def test_load_config_corrupt_file_returns_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_load_config_non_object_returns_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()
