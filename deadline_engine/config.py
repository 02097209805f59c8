"""Engine configuration: classification thresholds and score weights."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATHS = [
    Path("~/.deadline_engine/config.json"),
    Path("config/deadline_engine.json"),
]


class EngineConfig(BaseModel):
    """Tunable constants for classification, scoring and portfolio metrics."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    due_soon_days: int = Field(default=3, ge=1)
    medium_window_days: int = Field(default=7, ge=1)

    overdue_deduction: int = Field(default=30, ge=0)
    due_today_deduction: int = Field(default=20, ge=0)
    due_soon_deduction: int = Field(default=10, ge=0)
    critical_deduction: int = Field(default=15, ge=0)

    at_risk_threshold: int = Field(default=50, ge=0, le=100)

    @model_validator(mode="after")
    def _check_windows(self) -> "EngineConfig":
        if self.medium_window_days < self.due_soon_days:
            raise ValueError("medium_window_days must be >= due_soon_days")
        return self


DEFAULT_CONFIG = EngineConfig()


def load_config(config_path: Optional[Path] = None) -> EngineConfig:
    """
    Load engine configuration from a JSON file.

    Args:
        config_path: Optional explicit config file. When omitted the default
            paths are tried in order and defaults are used if none exists.

    Returns:
        EngineConfig instance

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValueError: If the file is not valid JSON or holds invalid values
    """
    if config_path is not None:
        path = Path(config_path).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        candidates = [path]
    else:
        candidates = [p.expanduser() for p in DEFAULT_CONFIG_PATHS if p.expanduser().exists()]

    for path in candidates:
        try:
            with open(path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
            config = EngineConfig(**data)
        except (json.JSONDecodeError, ValidationError, TypeError) as exc:
            raise ValueError(f"Invalid config in {path}: {exc}") from exc
        logger.info("Loaded engine config from %s", path)
        return config

    return DEFAULT_CONFIG
