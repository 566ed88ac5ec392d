"""Tests for configuration loading and merging."""

import logging
from pathlib import Path

import pytest
import yaml

from xmldoc2md.compute_config_hash import compute_config_hash
from xmldoc2md.deep_merge import deep_merge
from xmldoc2md.load_config import (
    load_config,
    normalize_file_name_style,
    options_from_config,
)
from xmldoc2md.render_options import CLEAN_GENERICS, VERBATIM


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


def test_compute_config_hash_stability() -> None:
    """Verify that config hash is stable regardless of key order."""
    config1 = {"b": 2, "a": 1, "nested": {"y": 2, "x": 1}}
    config2 = {"a": 1, "b": 2, "nested": {"x": 1, "y": 2}}
    assert compute_config_hash(config1) == compute_config_hash(config2)
    assert compute_config_hash(config1) != compute_config_hash({"a": 1})


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["render"]["file_name_style"] == VERBATIM
    assert config["render"]["code_block_language"] == "csharp"
    assert config["output"]["single_file"] is False


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "render": {"file_name_style": "clean", "root_namespace_to_trim": "Company"},
        "output": {"single_file": True},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))

    assert loaded["render"]["file_name_style"] == "clean"
    assert loaded["render"]["code_block_language"] == "csharp"  # Default
    assert loaded["output"]["single_file"] is True

    options = options_from_config(loaded)
    assert options.file_name_style == CLEAN_GENERICS
    assert options.root_namespace_to_trim == "Company"


def test_load_config_missing_file_warns(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Verify that a missing config file falls back to defaults."""
    with caplog.at_level(logging.WARNING, logger="xmldoc2md.load_config"):
        config = load_config(tmp_path / "missing.yml")
    assert config == load_config(None)
    assert "not found" in caplog.text


def test_load_config_does_not_share_defaults() -> None:
    """Verify that callers cannot mutate the defaults through a result."""
    config = load_config(None)
    config["render"]["file_name_style"] = "clean"
    assert load_config(None)["render"]["file_name_style"] == VERBATIM


def test_normalize_file_name_style() -> None:
    """Verify accepted spellings of the file name style."""
    assert normalize_file_name_style("Verbatim") == VERBATIM
    assert normalize_file_name_style("clean") == CLEAN_GENERICS
    assert normalize_file_name_style("clean_generics") == CLEAN_GENERICS
    assert normalize_file_name_style("CleanGenerics") == CLEAN_GENERICS
    with pytest.raises(ValueError, match="Unknown file name style"):
        normalize_file_name_style("short")
