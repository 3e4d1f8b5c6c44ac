"""Tests for YAML config loading."""

import pytest

from thresholdlab.data.classification import ARCHETYPES, ModelType, archetypes_from_config
from thresholdlab.utils.config import (
    EvaluationSettings,
    get_section,
    load_yaml,
    settings_from_config,
)


CONFIG_TEXT = """
evaluation:
  n_samples: 50
  history_length: 3
archetypes:
  conservative:
    seed: 42
    positive_mean: 0.6
"""


def test_load_yaml_roundtrip(tmp_path) -> None:
    path = tmp_path / "run.yaml"
    path.write_text(CONFIG_TEXT, encoding="utf-8")
    cfg = load_yaml(path)
    assert cfg["evaluation"]["n_samples"] == 50


def test_load_yaml_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_yaml(path) == {}


def test_load_yaml_missing(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_yaml(tmp_path / "nope.yaml")


def test_load_yaml_rejects_non_mapping(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_yaml(path)


def test_get_section() -> None:
    cfg = {"a": {"b": {"c": 1}}, "empty": None, "bad": 3}
    assert get_section(cfg, "a", "b") == {"c": 1}
    assert get_section(cfg, "missing") == {}
    assert get_section(cfg, "empty") == {}
    with pytest.raises(ValueError):
        get_section(cfg, "bad")


def test_settings_defaults_and_overrides() -> None:
    assert settings_from_config({}) == EvaluationSettings()
    s = settings_from_config({"evaluation": {"default_threshold": 0.4}})
    assert s.default_threshold == 0.4
    assert s.n_samples == 200


def test_settings_reject_unknown_keys() -> None:
    with pytest.raises(ValueError, match="Unknown evaluation settings"):
        settings_from_config({"evaluation": {"samples": 10}})


def test_yaml_drives_archetypes_and_settings(tmp_path) -> None:
    path = tmp_path / "run.yaml"
    path.write_text(CONFIG_TEXT, encoding="utf-8")
    cfg = load_yaml(path)

    settings = settings_from_config(cfg)
    assert (settings.n_samples, settings.history_length) == (50, 3)

    table = archetypes_from_config(cfg)
    conservative = table[ModelType.CONSERVATIVE]
    assert conservative.seed == 42
    assert conservative.positive_mean == 0.6
    assert conservative.negative_mean == ARCHETYPES[ModelType.CONSERVATIVE].negative_mean
    assert table[ModelType.BALANCED] == ARCHETYPES[ModelType.BALANCED]
