"""Typer CLI entrypoint for the accessible color tool server."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .config import load_yaml
from .container import create_container
from .core import EvaluationContext
from .errors import ContrastError
from .logging import configure_logging
from .schemas import AppConfig, load_config
from .server import generate_client_config, run_stdio

app = typer.Typer(help="Accessible color palette tools over MCP.")


def _load_app_config(path: Optional[Path]) -> AppConfig:
    if path is None:
        return AppConfig()
    try:
        return load_config(load_yaml(path))
    except (ValueError, ValidationError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _positive(value: float) -> float:
    if value <= 0:
        raise typer.BadParameter("must be greater than 0")
    return value


@app.command()
def serve(
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Run the MCP tool server on stdio."""
    app_config = _load_app_config(config)
    configure_logging(log_level or app_config.logging.level)

    container = create_container(settings=app_config.to_settings())
    run_stdio(container.server())


@app.command()
def check(
    foreground: str = typer.Argument(..., help="Foreground/text color."),
    background: str = typer.Argument(..., help="Background color."),
    font_size: float = typer.Option(16, callback=_positive, help="Font size in pixels (> 0)."),
    font_weight: str = typer.Option("normal", help="Font weight: normal or bold."),
    use_case: str = typer.Option("body-text", help="Intended use case for the color pair."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Evaluate one color pair and print the result as JSON."""
    app_config = _load_app_config(config)
    configure_logging(log_level or app_config.logging.level)

    container = create_container(settings=app_config.to_settings())
    evaluator = container.contrast_evaluator()
    try:
        context = EvaluationContext(
            font_size_px=font_size,
            font_weight=font_weight,
            use_case=use_case,
        )
        result = evaluator.evaluate(foreground, background, context)
    except ContrastError as exc:
        raise typer.BadParameter(str(exc), param_hint=getattr(exc, "argument", None)) from exc

    typer.echo(json.dumps(result.to_payload(), indent=2))


@app.command("client-config")
def client_config() -> None:
    """Print an mcpServers entry for MCP client configuration files."""
    typer.echo(json.dumps(generate_client_config(), indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
