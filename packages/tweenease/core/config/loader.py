"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from tweenease.core.config.models import AppConfig, LoggingConfig
from tweenease.core.curves.functions import EaseFn
from tweenease.core.curves.registry import require_curve
from tweenease.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "TWEENEASE_LOG_LEVEL"

_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def detect_format(file_path: Path | str) -> str:
    """Config format from the file extension: "json" or "yaml".

    Raises:
        ValueError: For any other extension.

    Example:
        >>> detect_format("tweenease.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return _FORMATS[suffix]
    except KeyError:
        raise ValueError(f"Unsupported config format: {suffix!r}") from None


def _parse(text: str, fmt: str) -> Any:
    if fmt == "json":
        return json.loads(text)
    data = yaml.safe_load(text)
    # An empty YAML document is an empty config
    return {} if data is None else data


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a JSON or YAML config file into a plain dict.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: For an unsupported extension, unparsable content or a
            document whose top level is not a mapping.
    """
    path = Path(path)
    fmt = detect_format(path)

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file does not exist: {path}") from None

    try:
        data = _parse(text, fmt)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid {fmt.upper()} in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config in {path} must be a mapping, got {type(data).__name__}")
    return data


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file yields the defaults. The log level can be overridden with
    the TWEENEASE_LOG_LEVEL environment variable.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to tweenease.json

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If config is invalid, including an unknown default curve
            or an unknown level in TWEENEASE_LOG_LEVEL
    """
    if path is None:
        path = AppConfig.default_path()

    if Path(path).exists():
        config = AppConfig.model_validate(load_config(path))
    else:
        logger.debug("No config at %s, using defaults", path)
        config = AppConfig()

    env_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if env_level:
        logger.debug("Log level %s taken from %s", env_level, LOG_LEVEL_ENV_VAR)
        logging_config = LoggingConfig.model_validate(
            {**config.logging.model_dump(), "level": env_level.upper()}
        )
        config = config.model_copy(update={"logging": logging_config})

    return config


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def default_curve(config: AppConfig) -> EaseFn:
    """Get the configured default curve function."""
    return require_curve(config.easing.default_curve)


def default_dtype(config: AppConfig) -> type[np.floating]:
    """Get the numpy scalar type for the configured precision."""
    return np.float32 if config.easing.precision == "float32" else np.float64
