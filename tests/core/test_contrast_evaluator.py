from __future__ import annotations

import pytest

from accesspalette.color import RGBA
from accesspalette.core import ContrastEvaluator, EvaluationContext
from accesspalette.errors import ColorParseError, InvalidFontWeight, InvalidUseCase


def build_stub_evaluator(scores: dict[tuple[str, str], float]) -> ContrastEvaluator:
    """Evaluator whose parser and scorer are deterministic stand-ins."""

    def parse(value: str, argument: str) -> RGBA:
        if value not in {name for pair in scores for name in pair}:
            raise ColorParseError(argument, value)
        level = sorted({name for pair in scores for name in pair}).index(value)
        return RGBA(red=level, green=level, blue=level)

    names = sorted({name for pair in scores for name in pair})

    def score(foreground: RGBA, background: RGBA) -> float:
        key = (names[int(foreground.red)], names[int(background.red)])
        if key in scores:
            return scores[key]
        return -scores[(key[1], key[0])]

    return ContrastEvaluator(parser=parse, scorer=score)


def test_black_on_white_passes_with_aaa():
    result = ContrastEvaluator().evaluate("#000000", "#ffffff")

    assert result.magnitude > 100
    assert result.passes is True
    assert result.polarity == "dark-on-light"
    assert result.rating == "AAA"
    assert result.recommendation is None
    assert result.minimum_required == 75


def test_white_on_black_has_negative_score():
    result = ContrastEvaluator().evaluate("#ffffff", "#000000")

    assert result.signed_score < -100
    assert result.magnitude > 100
    assert result.polarity == "light-on-dark"
    assert result.passes is True
    assert result.rating == "AAA"


def test_similar_greys_fail_with_recommendation():
    result = ContrastEvaluator().evaluate("#888888", "#999999")

    assert result.magnitude < 20
    assert result.passes is False
    assert result.rating == "fail"
    assert result.recommendation is not None


def test_identical_colors_never_pass():
    result = ContrastEvaluator().evaluate("#808080", "#808080")

    assert result.magnitude < 1
    assert result.passes is False
    assert result.polarity == "dark-on-light"


def test_near_miss_gets_increase_contrast_advice():
    result = ContrastEvaluator().evaluate("#777777", "#ffffff")

    assert result.passes is False
    assert result.magnitude >= 45
    assert "Increase contrast" in result.recommendation
    assert "too low" not in result.recommendation


def test_very_low_contrast_is_too_low():
    result = ContrastEvaluator().evaluate("#808080", "#858585")

    assert result.magnitude < 15
    assert "too low" in result.recommendation
    assert "need at least 75 for body-text" in result.recommendation


def test_mid_grey_rates_aa():
    result = ContrastEvaluator().evaluate("#555555", "#ffffff")

    assert 75 <= result.magnitude < 90
    assert result.rating == "AA"


def test_lenient_use_case_can_pass_with_fail_rating():
    context = EvaluationContext(use_case="disabled")
    result = ContrastEvaluator().evaluate("#999999", "#ffffff", context)

    assert result.minimum_required == 45
    assert result.magnitude < 60
    assert result.passes is True
    assert result.rating == "fail"
    assert result.recommendation is None


def test_font_metrics_change_body_text_minimum():
    evaluator = ContrastEvaluator()

    bold = evaluator.evaluate("#777777", "#ffffff", EvaluationContext(font_weight="bold"))
    large = evaluator.evaluate("#777777", "#ffffff", EvaluationContext(font_size_px=24))

    assert bold.minimum_required == 60
    assert bold.passes is True
    assert large.minimum_required == 60
    assert large.passes is True


@pytest.mark.parametrize(
    ("magnitude", "expected"),
    [(95.0, "AAA"), (90.0, "AAA"), (89.9, "AA"), (75.0, "AA"), (74.9, "A"), (60.0, "A"), (59.9, "fail"), (0.0, "fail")],
)
def test_rating_tiers_follow_magnitude(magnitude, expected):
    evaluator = build_stub_evaluator({("text", "bg"): magnitude})

    for use_case in ("body-text", "disabled", "ui-component"):
        result = evaluator.evaluate("text", "bg", EvaluationContext(use_case=use_case))
        assert result.rating == expected


@pytest.mark.parametrize(
    ("magnitude", "fragment"),
    [
        (10.0, "too low for any text use. Current Lc: 10.0, need at least 75 for body-text"),
        (30.0, "decorative or non-essential elements. Increase contrast by ~45 Lc points for body-text"),
        (50.0, "Increase contrast by ~25 Lc points. Try darkening the text"),
    ],
)
def test_recommendation_bands(magnitude, fragment):
    evaluator = build_stub_evaluator({("text", "bg"): magnitude})

    result = evaluator.evaluate("text", "bg")

    assert fragment in result.recommendation


def test_swapping_colors_negates_score_and_flips_polarity():
    evaluator = build_stub_evaluator({("ink", "paper"): 68.44})

    forward = evaluator.evaluate("ink", "paper", EvaluationContext(use_case="ui-component"))
    reverse = evaluator.evaluate("paper", "ink", EvaluationContext(use_case="ui-component"))

    assert reverse.signed_score == -forward.signed_score
    assert forward.polarity == "dark-on-light"
    assert reverse.polarity == "light-on-dark"
    assert (reverse.magnitude, reverse.passes, reverse.rating) == (
        forward.magnitude,
        forward.passes,
        forward.rating,
    )


def test_zero_score_is_dark_on_light():
    evaluator = build_stub_evaluator({("same", "other"): 0.0})

    result = evaluator.evaluate("same", "other")

    assert result.polarity == "dark-on-light"
    assert result.passes is False


def test_decisions_use_unrounded_magnitude():
    evaluator = build_stub_evaluator({("text", "bg"): 74.96})

    result = evaluator.evaluate("text", "bg")

    assert result.magnitude == 75.0
    assert result.passes is False
    assert result.rating == "A"
    assert result.recommendation is not None


def test_rounding_preserves_invariants():
    evaluator = build_stub_evaluator({("text", "bg"): -61.26})

    result = evaluator.evaluate("text", "bg")

    assert result.signed_score == pytest.approx(-61.3)
    assert result.magnitude == abs(result.signed_score)


def test_parse_errors_propagate_unchanged():
    evaluator = ContrastEvaluator()

    with pytest.raises(ColorParseError) as excinfo:
        evaluator.evaluate("#000000", "not-a-color")

    assert excinfo.value.argument == "background"
    assert "not a recognized color format" in str(excinfo.value)


def test_evaluator_is_usable_after_failure():
    evaluator = ContrastEvaluator()

    with pytest.raises(ColorParseError):
        evaluator.evaluate("bogus", "#ffffff")

    assert evaluator.evaluate("black", "white").passes is True


def test_context_rejects_unknown_values():
    with pytest.raises(InvalidUseCase):
        EvaluationContext(use_case="hero")
    with pytest.raises(InvalidFontWeight):
        EvaluationContext(font_weight="heavy")


def test_result_payload_uses_wire_names():
    payload = ContrastEvaluator().evaluate("#000000", "#ffffff").to_payload()

    assert set(payload) == {"lc", "lcAbsolute", "passes", "minimumLc", "polarity", "recommendation", "rating"}
    assert payload["recommendation"] is None


def test_half_point_deficit_rounds_up():
    evaluator = build_stub_evaluator({("text", "bg"): 30.5})

    result = evaluator.evaluate("text", "bg")

    assert "Increase contrast by ~45 Lc points for body-text" in result.recommendation
