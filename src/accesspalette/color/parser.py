"""Color notation parsing backed by coloraide."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from coloraide import Color

from ..errors import ColorParseError

_BARE_HEX = re.compile(r"^[0-9a-fA-F]{3}(?:[0-9a-fA-F]{3})?$")
_HASH_HEX = re.compile(r"^#[0-9a-fA-F]+$")
_VALID_HEX = re.compile(r"^#[0-9a-fA-F]{3}(?:[0-9a-fA-F]{3})?$")


@dataclass(frozen=True, slots=True)
class RGBA:
    """sRGB channels in the 0..1 range plus alpha."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @property
    def channels(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return "#" + "".join(f"{round(value * 255):02x}" for value in self.channels)


def _normalize(value: str) -> str:
    text = value.strip()
    if _BARE_HEX.match(text):
        return f"#{text}"
    return text


def parse_color(value: str, argument: str = "color") -> RGBA:
    """Parse hex, rgb() or named colors (and other CSS notations) into sRGB.

    Hex notation is limited to 3 or 6 digits; the leading ``#`` is optional.
    Colors outside the sRGB gamut are clipped.
    """
    if not isinstance(value, str) or not value.strip():
        raise ColorParseError(argument, str(value))

    text = _normalize(value)
    if _HASH_HEX.match(text) and not _VALID_HEX.match(text):
        raise ColorParseError(argument, value)

    try:
        color = Color(text)
    except ValueError as exc:
        raise ColorParseError(argument, value) from exc

    data = color.convert("srgb").clip().to_dict()
    red, green, blue = (0.0 if math.isnan(c) else float(c) for c in data["coords"])
    alpha = data.get("alpha", 1.0)
    if alpha is None or math.isnan(alpha):
        alpha = 1.0
    return RGBA(red=red, green=green, blue=blue, alpha=float(alpha))


__all__ = ["RGBA", "parse_color"]
