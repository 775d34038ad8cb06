"""Dependency injection container for the tool server."""

from __future__ import annotations

from dependency_injector import containers, providers

from .color import contrast_score, parse_color
from .core import ContrastEvaluator, ThresholdConfig, ThresholdPolicy
from .server import create_server
from .tools import ToolRegistry
from .tools.contrast import build_check_contrast_tool
from .tools.placeholders import (
    analyze_colors_tool,
    export_tokens_tool,
    generate_palette_tool,
    simulate_colorblind_tool,
)


class ToolServerContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    threshold_config = providers.Singleton(ThresholdConfig)
    threshold_policy = providers.Singleton(ThresholdPolicy, config=threshold_config)

    color_parser = providers.Object(parse_color)
    contrast_scorer = providers.Object(contrast_score)

    contrast_evaluator = providers.Singleton(
        ContrastEvaluator,
        policy=threshold_policy,
        parser=color_parser,
        scorer=contrast_scorer,
    )

    check_contrast_tool = providers.Singleton(
        build_check_contrast_tool,
        evaluator=contrast_evaluator,
    )

    tools = providers.List(
        check_contrast_tool,
        providers.Singleton(generate_palette_tool),
        providers.Singleton(simulate_colorblind_tool),
        providers.Singleton(export_tokens_tool),
        providers.Singleton(analyze_colors_tool),
    )

    tool_registry = providers.Singleton(ToolRegistry, tools=tools)

    server = providers.Factory(
        create_server,
        registry=tool_registry,
        name=config.server.name,
        instructions=config.server.instructions,
    )


def create_container(*, settings: dict | None = None) -> ToolServerContainer:
    """Instantiate container with optional overrides."""

    container = ToolServerContainer()

    if not settings:
        return container

    server_settings = settings.get("server", {}) if isinstance(settings, dict) else {}
    if server_settings:
        container.config.override({"server": server_settings})

    threshold_settings = settings.get("thresholds", {}) if isinstance(settings, dict) else {}
    if threshold_settings:
        threshold_config = ThresholdConfig.from_settings(threshold_settings)
        container.threshold_config.override(providers.Object(threshold_config))

    return container
