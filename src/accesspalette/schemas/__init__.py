"""Pydantic schema definitions for host configuration."""

from __future__ import annotations

from .config import AppConfig, LoggingConfig, ServerConfig, ThresholdSettings, load_config

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "ServerConfig",
    "ThresholdSettings",
    "load_config",
]
