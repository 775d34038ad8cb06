"""Contrast evaluation core."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from .evaluators import ContrastEvaluator, ContrastResult, EvaluationContext
from .thresholds import ThresholdConfig, ThresholdPolicy


@runtime_checkable
class Evaluator(Protocol):
    """Evaluator contract for scoring a color pair."""

    def evaluate(
        self,
        foreground: str,
        background: str,
        context: EvaluationContext | None = None,
    ) -> ContrastResult:
        """Return the accessibility verdict for a foreground/background pair."""


__all__ = [
    "ContrastEvaluator",
    "ContrastResult",
    "EvaluationContext",
    "Evaluator",
    "ThresholdConfig",
    "ThresholdPolicy",
]
