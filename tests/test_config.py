from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from jobmatch.config import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    ConfigError,
    ScoringConfig,
    config_from_env,
    config_from_mapping,
    load_config,
)


def test_default_weights_sum_to_one():
    assert sum(DEFAULT_CONFIG.weights.as_dict().values()) == pytest.approx(1.0)
    assert DEFAULT_CONFIG.weights.skills == 0.40


def test_weights_must_sum_to_one():
    with pytest.raises(ValidationError):
        ScoringConfig(weights={"skills": 0.5, "experience": 0.5, "location": 0.5, "salary": 0.0})
    with pytest.raises(ConfigError):
        config_from_mapping({"weights": {"skills": 0.9}})


def test_unknown_dimension_rejected():
    with pytest.raises(ConfigError):
        config_from_mapping({"weights": {"education": 0.1}})


def test_unknown_key_rejected():
    with pytest.raises(ConfigError):
        config_from_mapping({"salary_curve": "steep"})


def test_out_of_range_value_rejected():
    with pytest.raises(ConfigError):
        config_from_mapping({"unknown_location_score": 150})
    with pytest.raises(ConfigError):
        config_from_mapping({"default_top_n": 0})


def test_location_floor_above_ceiling_rejected():
    with pytest.raises(ConfigError):
        config_from_mapping({"partial_location_floor": 90, "partial_location_ceiling": 70})


def test_partial_weight_override_merges_with_defaults():
    config = config_from_mapping({"weights": {"skills": 0.5, "experience": 0.2}})
    assert config.weights.as_dict() == {
        "skills": 0.5,
        "experience": 0.2,
        "location": 0.15,
        "salary": 0.15,
    }
    assert DEFAULT_CONFIG.weights.skills == 0.40


def test_configs_are_immutable_and_isolated():
    derived = config_from_mapping({"unknown_location_score": 40})
    assert derived.weights == DEFAULT_CONFIG.weights
    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.weights.skills = 5.0
    with pytest.raises(ValidationError):
        derived.unknown_location_score = 10
    assert DEFAULT_CONFIG.weights.skills == 0.40
    assert derived.unknown_location_score == 40
    assert hash(DEFAULT_CONFIG) == hash(ScoringConfig())


def test_load_config_from_file(tmp_path):
    path = tmp_path / "scoring.json"
    path.write_text(json.dumps({"unknown_location_score": 40, "default_top_n": 5}), encoding="utf-8")
    config = load_config(path)
    assert config.unknown_location_score == 40
    assert config.default_top_n == 5


def test_load_config_rejects_invalid_json(tmp_path):
    path = tmp_path / "scoring.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_load_config_missing_file(tmp_path, monkeypatch):
    missing = tmp_path / "absent.json"
    with pytest.raises(ConfigError):
        load_config(missing)
    monkeypatch.setenv(CONFIG_ENV_VAR, str(missing))
    with pytest.raises(ConfigError):
        config_from_env()


def test_config_from_env(tmp_path, monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert config_from_env() is DEFAULT_CONFIG

    path = tmp_path / "scoring.json"
    path.write_text(json.dumps({"salary_overage_penalty": 1.0}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert config_from_env().salary_overage_penalty == 1.0
