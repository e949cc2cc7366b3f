"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from automatic_interface.deep_merge import deep_merge
from automatic_interface.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}
    assert base == {"nested": {"x": 1, "y": 2}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3, 4]})
    assert merged == {"arr": [3, 4]}


def test_deep_merge_root_types_additive() -> None:
    """Verify that root object types are merged additively in order."""
    base = {"root_object_types": ["object", "Object"]}
    update = {"root_object_types": ["Object", "UnityEngine.Object"]}
    merged = deep_merge(base, update)
    assert merged["root_object_types"] == ["object", "Object", "UnityEngine.Object"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "nope.yml")) == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    user_config = {
        "rendering": {"tool_version": "1.0.0", "indent": "\t"},
        "output": {"file_suffix": ".cs"},
    }
    config_file.write_text(yaml.dump(user_config), encoding="utf-8")

    config = load_config(str(config_file))
    assert config["rendering"]["tool_version"] == "1.0.0"
    assert config["rendering"]["indent"] == "\t"
    assert config["rendering"]["tool_name"] == "AutomaticInterface"
    assert config["output"]["file_suffix"] == ".cs"
    assert DEFAULT_CONFIG["rendering"]["indent"] == "    "
