"""Errors raised by the contrast evaluation core."""

from __future__ import annotations


class ContrastError(ValueError):
    """Base class for caller-supplied input the core cannot evaluate."""


class ColorParseError(ContrastError):
    """Raised when a color string is not a recognized notation."""

    def __init__(self, argument: str, value: str):
        super().__init__(f"{argument} {value!r} is not a recognized color format")
        self.argument = argument
        self.value = value


class InvalidUseCase(ContrastError):
    """Raised for a use case outside the recognized set."""

    def __init__(self, value: object):
        super().__init__(f"useCase {value!r} is not a recognized use case")
        self.argument = "useCase"
        self.value = value


class InvalidFontWeight(ContrastError):
    """Raised for a font weight other than normal or bold."""

    def __init__(self, value: object):
        super().__init__(f"fontWeight {value!r} must be 'normal' or 'bold'")
        self.argument = "fontWeight"
        self.value = value


__all__ = ["ContrastError", "ColorParseError", "InvalidUseCase", "InvalidFontWeight"]
