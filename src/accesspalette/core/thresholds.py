"""Minimum contrast policy per rendering context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping

from ..errors import InvalidFontWeight, InvalidUseCase

UseCase = Literal[
    "body-text",
    "large-text",
    "ui-component",
    "non-text",
    "placeholder",
    "disabled",
]
FontWeight = Literal["normal", "bold"]

USE_CASES: tuple[str, ...] = (
    "body-text",
    "large-text",
    "ui-component",
    "non-text",
    "placeholder",
    "disabled",
)
FONT_WEIGHTS: tuple[str, ...] = ("normal", "bold")


def _default_use_case_minimums() -> dict[str, float]:
    return {
        "large-text": 60,
        "ui-component": 60,
        "non-text": 45,
        "placeholder": 45,
        "disabled": 45,
    }


@dataclass
class ThresholdConfig:
    """Configuration for minimum Lc thresholds."""

    use_case_minimums: dict[str, float] = field(default_factory=_default_use_case_minimums)
    large_text_px: float = 24
    body_text_minimum: float = 75
    large_body_text_minimum: float = 60

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "ThresholdConfig":
        """Build a config from partial settings, keeping defaults for the rest."""
        values = dict(settings)
        minimums = _default_use_case_minimums()
        minimums.update(values.pop("use_case_minimums", None) or {})
        return cls(use_case_minimums=minimums, **values)


def validate_use_case(value: Any) -> str:
    if value not in USE_CASES:
        raise InvalidUseCase(value)
    return value


def validate_font_weight(value: Any) -> str:
    if value not in FONT_WEIGHTS:
        raise InvalidFontWeight(value)
    return value


class ThresholdPolicy:
    """Resolve the minimum acceptable contrast magnitude for a context.

    Body text is the only use case whose minimum depends on font metrics:
    large or bold glyphs stay legible at lower contrast. Every other use case
    carries a fixed minimum.
    """

    def __init__(self, *, config: ThresholdConfig | None = None) -> None:
        self._config = config or ThresholdConfig()

    def resolve_minimum(
        self,
        use_case: UseCase | str,
        font_size_px: float,
        font_weight: FontWeight | str,
    ) -> float:
        validate_use_case(use_case)
        validate_font_weight(font_weight)

        if use_case != "body-text":
            return self._config.use_case_minimums[use_case]

        is_large = font_size_px >= self._config.large_text_px
        is_bold = font_weight == "bold"
        if is_large or is_bold:
            return self._config.large_body_text_minimum
        return self._config.body_text_minimum


__all__ = [
    "FONT_WEIGHTS",
    "FontWeight",
    "ThresholdConfig",
    "ThresholdPolicy",
    "USE_CASES",
    "UseCase",
    "validate_font_weight",
    "validate_use_case",
]
