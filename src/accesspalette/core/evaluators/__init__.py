"""Evaluator implementations for the contrast core."""

from .contrast import ContrastEvaluator, ContrastResult, EvaluationContext

__all__ = ["ContrastEvaluator", "ContrastResult", "EvaluationContext"]
