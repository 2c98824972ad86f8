from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "JOBMATCH_SCORING_CONFIG"

DIMENSIONS = ("skills", "experience", "location", "salary")


class ConfigError(ValueError):
    """Raised when scoring configuration is malformed."""


class DimensionWeights(BaseModel):
    """Share of each sub-score in the overall score; must sum to 1.0."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    skills: float = Field(default=0.40, ge=0, le=1, allow_inf_nan=False)
    experience: float = Field(default=0.30, ge=0, le=1, allow_inf_nan=False)
    location: float = Field(default=0.15, ge=0, le=1, allow_inf_nan=False)
    salary: float = Field(default=0.15, ge=0, le=1, allow_inf_nan=False)

    @model_validator(mode="after")
    def _check_total(self) -> DimensionWeights:
        total = sum(self.as_dict().values())
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"weights must sum to 1.0, got {total:.6f}")
        return self

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in DIMENSIONS}


class ScoringConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    weights: DimensionWeights = Field(default_factory=DimensionWeights)
    unknown_location_score: float = Field(default=50.0, ge=0, le=100, allow_inf_nan=False)
    partial_location_floor: float = Field(default=50.0, ge=0, le=100, allow_inf_nan=False)
    partial_location_ceiling: float = Field(default=80.0, ge=0, le=100, allow_inf_nan=False)
    overqualified_grace_years: float = Field(default=5.0, ge=0, allow_inf_nan=False)
    overqualified_penalty_per_year: float = Field(default=5.0, ge=0, allow_inf_nan=False)
    overqualified_floor: float = Field(default=60.0, ge=0, le=100, allow_inf_nan=False)
    salary_overage_penalty: float = Field(default=2.0, ge=0, allow_inf_nan=False)
    recommendation_threshold: float = Field(default=50.0, ge=0, le=100, allow_inf_nan=False)
    default_top_n: int = Field(default=20, ge=1)

    @model_validator(mode="after")
    def _check_location_band(self) -> ScoringConfig:
        if self.partial_location_floor > self.partial_location_ceiling:
            raise ValueError("partial_location_floor cannot exceed partial_location_ceiling")
        return self


DEFAULT_CONFIG = ScoringConfig()


def config_from_mapping(overrides: dict, base: ScoringConfig = DEFAULT_CONFIG) -> ScoringConfig:
    if not isinstance(overrides, dict):
        raise ConfigError("Scoring config must be a JSON object")
    data = base.model_dump()
    for key, value in overrides.items():
        if key == "weights" and isinstance(value, dict):
            data["weights"] = {**data["weights"], **value}
        else:
            data[key] = value
    try:
        return ScoringConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid scoring config: {exc}") from exc


def load_config(path: str | Path) -> ScoringConfig:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read scoring config {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in scoring config {path}: {exc}") from exc
    config = config_from_mapping(raw)
    logger.info("Loaded scoring config from %s", path)
    return config


def config_from_env() -> ScoringConfig:
    path = os.getenv(CONFIG_ENV_VAR)
    if not path:
        return DEFAULT_CONFIG
    return load_config(path)
