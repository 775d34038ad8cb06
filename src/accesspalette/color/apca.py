"""
APCA (Accessible Perceptual Contrast Algorithm) lightness contrast.

Implements the APCA-W3 0.0.98G-4g constants. The returned Lc value is signed:
positive for dark text on a light background, negative for light text on a
dark background. Its magnitude typically spans 0 to about 108.

Note that the metric is asymmetric: the order of text and background matters,
and small luminance differences are clamped to zero.
"""

from __future__ import annotations

import math

from .parser import RGBA

_MAIN_TRC = 2.4
_SRGB_COEFFICIENTS = (0.2126729, 0.7151522, 0.0721750)

_NORM_BACKGROUND = 0.56
_NORM_TEXT = 0.57
_REV_TEXT = 0.62
_REV_BACKGROUND = 0.65

_BLACK_THRESHOLD = 0.022
_BLACK_CLAMP = 1.414
_SCALE = 1.14
_LOW_OFFSET = 0.027
_LOW_CLIP = 0.1
_DELTA_Y_MIN = 0.0005

_INPUT_RANGE = (0.0, 1.1)


def srgb_to_y(rgb: tuple[float, float, float]) -> float:
    """Estimated screen luminance of an sRGB color with 0..1 channels."""
    return sum(
        coefficient * math.pow(channel, _MAIN_TRC)
        for coefficient, channel in zip(_SRGB_COEFFICIENTS, rgb)
    )


def _soft_clamp_black(y: float) -> float:
    if y > _BLACK_THRESHOLD:
        return y
    return y + math.pow(_BLACK_THRESHOLD - y, _BLACK_CLAMP)


def apca_contrast(text_y: float, background_y: float) -> float:
    """Signed Lc for a text luminance on a background luminance."""
    low, high = _INPUT_RANGE
    if (
        math.isnan(text_y)
        or math.isnan(background_y)
        or min(text_y, background_y) < low
        or max(text_y, background_y) > high
    ):
        return 0.0

    text_y = _soft_clamp_black(text_y)
    background_y = _soft_clamp_black(background_y)

    if abs(background_y - text_y) < _DELTA_Y_MIN:
        return 0.0

    if background_y > text_y:
        # Dark text on light background
        sapc = (
            math.pow(background_y, _NORM_BACKGROUND) - math.pow(text_y, _NORM_TEXT)
        ) * _SCALE
        contrast = 0.0 if sapc < _LOW_CLIP else sapc - _LOW_OFFSET
    else:
        # Light text on dark background
        sapc = (
            math.pow(background_y, _REV_BACKGROUND) - math.pow(text_y, _REV_TEXT)
        ) * _SCALE
        contrast = 0.0 if sapc > -_LOW_CLIP else sapc + _LOW_OFFSET

    return contrast * 100.0


def alpha_blend(foreground: RGBA, background: RGBA) -> RGBA:
    """Composite a translucent foreground over an opaque background.

    Blended channels are quantized to 8 bits.
    """
    alpha = foreground.alpha
    if alpha >= 1.0:
        return foreground
    alpha = max(alpha, 0.0)
    red, green, blue = (
        min(math.floor((bg * (1.0 - alpha) + fg * alpha) * 255 + 0.5), 255) / 255
        for fg, bg in zip(foreground.channels, background.channels)
    )
    return RGBA(red=red, green=green, blue=blue)


def contrast_score(foreground: RGBA, background: RGBA) -> float:
    """Signed APCA Lc of ``foreground`` text on ``background``."""
    text = alpha_blend(foreground, background)
    return apca_contrast(srgb_to_y(text.channels), srgb_to_y(background.channels))


__all__ = ["alpha_blend", "apca_contrast", "contrast_score", "srgb_to_y"]
