"""Pydantic configuration schema for the YAML settings file."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

FixedUseCase = Literal["large-text", "ui-component", "non-text", "placeholder", "disabled"]


class ServerConfig(BaseModel):
    name: str | None = None
    instructions: str | None = None

    model_config = ConfigDict(extra="forbid")


class ThresholdSettings(BaseModel):
    """Overrides for the minimum Lc policy."""

    use_case_minimums: dict[FixedUseCase, float] | None = None
    large_text_px: float | None = Field(default=None, gt=0)
    body_text_minimum: float | None = Field(default=None, ge=0)
    large_body_text_minimum: float | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    level: str = "INFO"


class AppConfig(BaseModel):
    server: ServerConfig = Field(default_factory=ServerConfig)
    thresholds: ThresholdSettings = Field(default_factory=ThresholdSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        server_settings = self.server.model_dump(exclude_none=True)
        if server_settings:
            settings["server"] = server_settings
        threshold_settings = self.thresholds.model_dump(exclude_none=True)
        if threshold_settings:
            settings["thresholds"] = threshold_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    """Validate a raw settings mapping; non-mappings raise ValidationError."""
    return AppConfig.model_validate(raw)
