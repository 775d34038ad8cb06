"""APCA contrast evaluation for a foreground/background pair."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Literal

import structlog

from ...color import RGBA, contrast_score, parse_color
from ..thresholds import (
    FontWeight,
    ThresholdPolicy,
    UseCase,
    validate_font_weight,
    validate_use_case,
)

Polarity = Literal["dark-on-light", "light-on-dark"]
Rating = Literal["AAA", "AA", "A", "fail"]

ColorParser = Callable[[str, str], RGBA]
ContrastScorer = Callable[[RGBA, RGBA], float]

# Rating tiers apply to the magnitude alone, independent of the use case minimum.
RATING_TIERS: tuple[tuple[float, Rating], ...] = (
    (90, "AAA"),
    (75, "AA"),
    (60, "A"),
)

TOO_LOW_MAGNITUDE = 15
DECORATIVE_MAGNITUDE = 45


@dataclass(frozen=True, slots=True)
class EvaluationContext:
    """Rendering context that determines the minimum contrast."""

    font_size_px: float = 16
    font_weight: FontWeight = "normal"
    use_case: UseCase = "body-text"

    def __post_init__(self) -> None:
        validate_font_weight(self.font_weight)
        validate_use_case(self.use_case)


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """Accessibility verdict for one color pair."""

    signed_score: float
    magnitude: float
    passes: bool
    minimum_required: float
    polarity: Polarity
    rating: Rating
    recommendation: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "lc": self.signed_score,
            "lcAbsolute": self.magnitude,
            "passes": self.passes,
            "minimumLc": self.minimum_required,
            "polarity": self.polarity,
            "recommendation": self.recommendation,
            "rating": self.rating,
        }


def rate(magnitude: float) -> Rating:
    for floor, rating in RATING_TIERS:
        if magnitude >= floor:
            return rating
    return "fail"


def recommend(
    *,
    passes: bool,
    magnitude: float,
    minimum_required: float,
    use_case: str,
) -> str | None:
    """Plain-language advice for a failing pair, chosen by magnitude band."""
    if passes:
        return None

    # Halves round up.
    deficit = math.floor(minimum_required - magnitude + 0.5)

    if magnitude < TOO_LOW_MAGNITUDE:
        return (
            f"Contrast is too low for any text use. Current Lc: {magnitude:.1f}, "
            f"need at least {minimum_required:g} for {use_case}."
        )

    if magnitude < DECORATIVE_MAGNITUDE:
        return (
            "Only suitable for decorative or non-essential elements. "
            f"Increase contrast by ~{deficit} Lc points for {use_case}."
        )

    return (
        f"Increase contrast by ~{deficit} Lc points. Try darkening the text "
        "or lightening the background (or vice versa for dark mode)."
    )


class ContrastEvaluator:
    """Check a color pair against the APCA minimum for its use case."""

    def __init__(
        self,
        *,
        policy: ThresholdPolicy | None = None,
        parser: ColorParser = parse_color,
        scorer: ContrastScorer = contrast_score,
    ) -> None:
        self._policy = policy or ThresholdPolicy()
        self._parse = parser
        self._score = scorer
        self._logger = structlog.get_logger(__name__)

    def evaluate(
        self,
        foreground: str,
        background: str,
        context: EvaluationContext | None = None,
    ) -> ContrastResult:
        context = context or EvaluationContext()
        minimum_required = self._policy.resolve_minimum(
            context.use_case,
            context.font_size_px,
            context.font_weight,
        )

        signed_score = self._score(
            self._parse(foreground, "foreground"),
            self._parse(background, "background"),
        )
        magnitude = abs(signed_score)
        polarity: Polarity = "dark-on-light" if signed_score >= 0 else "light-on-dark"
        passes = magnitude >= minimum_required
        rating = rate(magnitude)
        recommendation = recommend(
            passes=passes,
            magnitude=magnitude,
            minimum_required=minimum_required,
            use_case=context.use_case,
        )

        self._logger.debug(
            "contrast.evaluated",
            foreground=foreground,
            background=background,
            use_case=context.use_case,
            lc=signed_score,
            minimum_lc=minimum_required,
            passes=passes,
        )

        return ContrastResult(
            signed_score=round(signed_score, 1),
            magnitude=round(magnitude, 1),
            passes=passes,
            minimum_required=minimum_required,
            polarity=polarity,
            rating=rating,
            recommendation=recommendation,
        )
