"""Settings file loading (TOML, validated with pydantic)."""
from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dice_ev.mechanics.dice import RollLimits

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "EV_CONFIG"
DEFAULT_CONFIG_NAME = "ev.toml"


class ConfigError(Exception):
    """Raised when a settings file cannot be read or is invalid."""


class OutputConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    style: Literal["multi", "single"] = "multi"
    indent: int = Field(default=4, ge=0)


class LimitsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_dice: Optional[int] = Field(default=None, gt=0)
    max_sides: Optional[int] = Field(default=None, gt=0)
    max_modifier: Optional[int] = Field(default=None, gt=0)

    def to_limits(self) -> RollLimits:
        return RollLimits(
            max_dice=self.max_dice,
            max_sides=self.max_sides,
            max_modifier=self.max_modifier,
        )


class EvConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    output: OutputConfig = Field(default_factory=OutputConfig)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)


def _resolve_path(path: Path | None) -> tuple[Path, bool]:
    """Return the config path to use and whether the user named it explicitly."""
    if path is not None:
        return path, True
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path), True
    return Path.cwd() / DEFAULT_CONFIG_NAME, False


def load_config(path: Path | None = None) -> EvConfig:
    """Load settings from path, $EV_CONFIG, or ./ev.toml, in that order.

    A missing ./ev.toml yields defaults; a missing file that was named
    explicitly is an error.
    """
    config_path, explicit = _resolve_path(path)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"config file not found: {config_path}")
        return EvConfig()

    try:
        with open(config_path, "rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"cannot read {config_path}: {exc}") from exc

    try:
        config = EvConfig.model_validate(data)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(f"invalid config {config_path}: {errors}") from exc

    logger.debug("Loaded config from %s: %s", config_path, config)
    return config
