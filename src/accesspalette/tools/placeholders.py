"""Advertised tools that are not implemented yet.

Each handler validates its arguments against the published schema and echoes
them back with a ``not_implemented`` status.
"""

import json
from typing import Annotated, Any, Literal

from pydantic import Field

from . import ToolSpec

Harmony = Literal[
    "complementary",
    "analogous",
    "triadic",
    "split-complementary",
    "tetradic",
    "monochromatic",
]
ColorblindType = Literal["protanopia", "deuteranopia", "tritanopia", "achromatopsia", "all"]
ExportFormat = Literal["css", "tailwind", "chakra", "material", "scss", "json", "style-dictionary"]


def not_implemented(message: str, arguments: dict[str, Any]) -> str:
    return json.dumps(
        {
            "status": "not_implemented",
            "message": message,
            "input": {key: value for key, value in arguments.items() if value is not None},
        },
        indent=2,
    )


def generate_palette_tool() -> ToolSpec:
    def generate_palette(
        seedColor: Annotated[
            str | None, Field(description="Starting color (hex, rgb, or hsl)")
        ] = None,
        harmony: Annotated[Harmony | None, Field(description="Color harmony type")] = None,
        mood: Annotated[
            str | None,
            Field(description="Mood keywords: professional, playful, bold, minimal, warm, cool"),
        ] = None,
        industry: Annotated[
            str | None, Field(description="Industry: fintech, health, e-commerce, saas, gaming")
        ] = None,
        darkMode: Annotated[bool, Field(description="Generate dark mode variant")] = False,
        existingColors: Annotated[
            list[str] | None, Field(description="Existing colors to incorporate")
        ] = None,
    ) -> str:
        return not_implemented(
            "Palette generation is not implemented yet",
            {
                "seedColor": seedColor,
                "harmony": harmony,
                "mood": mood,
                "industry": industry,
                "darkMode": darkMode,
                "existingColors": existingColors,
            },
        )

    return ToolSpec(
        name="generate_palette",
        description=(
            "Generate a complete, accessible color palette based on inputs like "
            "seed color, mood, or industry"
        ),
        handler=generate_palette,
    )


def simulate_colorblind_tool() -> ToolSpec:
    def simulate_colorblind(
        colors: Annotated[list[str], Field(description="Colors to simulate (hex, rgb, or hsl)")],
        type: Annotated[
            ColorblindType, Field(description="Type of color blindness to simulate")
        ] = "all",
    ) -> str:
        return not_implemented(
            "Colorblind simulation is not implemented yet",
            {"colors": colors, "type": type},
        )

    return ToolSpec(
        name="simulate_colorblind",
        description="Simulate how colors appear to users with different types of color blindness",
        handler=simulate_colorblind,
    )


def export_tokens_tool() -> ToolSpec:
    def export_tokens(
        palette: Annotated[dict[str, Any], Field(description="Palette object to export")],
        format: Annotated[ExportFormat, Field(description="Export format")],
        prefix: Annotated[str, Field(description="Variable prefix")] = "color",
        includeRgb: Annotated[
            bool, Field(description="Include RGB values for opacity support")
        ] = False,
    ) -> str:
        return not_implemented(
            "Export is not implemented yet",
            {"palette": palette, "format": format, "prefix": prefix, "includeRgb": includeRgb},
        )

    return ToolSpec(
        name="export_tokens",
        description="Export a color palette in various formats (CSS, Tailwind, JSON, etc.)",
        handler=export_tokens,
    )


def analyze_colors_tool() -> ToolSpec:
    def analyze_colors(
        colors: Annotated[
            list[str] | None, Field(description="Colors to analyze directly")
        ] = None,
        scanPath: Annotated[
            str | None, Field(description="Path to scan for hardcoded colors")
        ] = None,
        filePatterns: Annotated[
            list[str] | None,
            Field(description="Glob patterns to scan (default: css, scss, ts, tsx, js, jsx)"),
        ] = None,
    ) -> str:
        return not_implemented(
            "Color analysis is not implemented yet",
            {"colors": colors, "scanPath": scanPath, "filePatterns": filePatterns},
        )

    return ToolSpec(
        name="analyze_colors",
        description=(
            "Analyze colors from input or scan a codebase for hardcoded colors "
            "and accessibility issues"
        ),
        handler=analyze_colors,
    )


__all__ = [
    "analyze_colors_tool",
    "export_tokens_tool",
    "generate_palette_tool",
    "not_implemented",
    "simulate_colorblind_tool",
]
