"""Configuration models for Tweenease."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tweenease.core.curves.registry import resolve_by_name


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")
    structured: bool = Field(default=False, description="Emit structured JSON log lines")


class EasingConfig(BaseModel):
    """Defaults applied when a caller does not pick a curve or sample count."""

    model_config = ConfigDict(extra="forbid")

    default_curve: str = Field(
        default="linear", description="Curve name, in any casing or separator style"
    )

    default_samples: int = Field(default=64, ge=2, description="Samples per sampled curve")

    precision: Literal["float32", "float64"] = Field(
        default="float64", description="Numeric precision for evaluated arrays"
    )

    @field_validator("default_curve")
    @classmethod
    def _validate_default_curve(cls, v: str) -> str:
        if resolve_by_name(v) is None:
            raise ValueError(f"Unknown easing curve: {v!r}")
        return v


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    logging: LoggingConfig = LoggingConfig()
    easing: EasingConfig = EasingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("tweenease.json")
