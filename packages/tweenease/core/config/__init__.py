"""Configuration models and loaders."""

from tweenease.core.config.loader import (
    configure_logging,
    default_curve,
    default_dtype,
    load_app_config,
    load_config,
)
from tweenease.core.config.models import AppConfig, EasingConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "EasingConfig",
    "LoggingConfig",
    "configure_logging",
    "default_curve",
    "default_dtype",
    "load_app_config",
    "load_config",
]
