"""The check_contrast tool."""

import json
from typing import Annotated

import structlog
from fastmcp.exceptions import ToolError
from pydantic import Field

from ..core import EvaluationContext, Evaluator
from ..core.thresholds import FontWeight, UseCase
from ..errors import ContrastError
from . import ToolSpec

CHECK_CONTRAST_DESCRIPTION = (
    "Check if a foreground/background color pair meets APCA accessibility standards"
)


def build_check_contrast_tool(evaluator: Evaluator) -> ToolSpec:
    """Wrap an evaluator in a typed handler serializing results as JSON text."""
    logger = structlog.get_logger(__name__)

    def check_contrast(
        foreground: Annotated[
            str, Field(description="Foreground/text color (hex, rgb, or named color)")
        ],
        background: Annotated[
            str, Field(description="Background color (hex, rgb, or named color)")
        ],
        fontSize: Annotated[float, Field(gt=0, description="Font size in pixels")] = 16,
        fontWeight: Annotated[FontWeight, Field(description="Font weight")] = "normal",
        useCase: Annotated[
            UseCase, Field(description="The intended use case for this color pair")
        ] = "body-text",
    ) -> str:
        try:
            context = EvaluationContext(
                font_size_px=fontSize,
                font_weight=fontWeight,
                use_case=useCase,
            )
            result = evaluator.evaluate(foreground, background, context)
        except ContrastError as exc:
            logger.warning("tool.failed", tool="check_contrast", error=str(exc))
            raise ToolError(str(exc)) from exc

        return json.dumps(result.to_payload(), indent=2)

    return ToolSpec(
        name="check_contrast",
        description=CHECK_CONTRAST_DESCRIPTION,
        handler=check_contrast,
    )


__all__ = ["CHECK_CONTRAST_DESCRIPTION", "build_check_contrast_tool"]
