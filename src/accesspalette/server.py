"""FastMCP host serving the registered tools over stdio."""

from __future__ import annotations

import sys

import structlog
from fastmcp import FastMCP

from . import __version__
from .tools import ToolRegistry

DEFAULT_NAME = "accesspalette"
DEFAULT_INSTRUCTIONS = (
    "accesspalette generates and checks accessible color palettes.\n"
    "It helps developers choose harmonious colors that meet APCA accessibility standards.\n"
    "Use these tools when users ask about colors, palettes, or accessibility."
)


def create_server(
    registry: ToolRegistry,
    *,
    name: str | None = None,
    instructions: str | None = None,
) -> FastMCP:
    """Create a FastMCP server exposing every tool in the registry."""
    mcp = FastMCP(
        name=name or DEFAULT_NAME,
        instructions=instructions or DEFAULT_INSTRUCTIONS,
        version=__version__,
    )
    for tool in registry:
        mcp.tool(tool.handler, name=tool.name, description=tool.description)
    return mcp


def run_stdio(server: FastMCP) -> None:
    """Serve on stdio until the client disconnects."""
    logger = structlog.get_logger(__name__)
    logger.info("server.starting", name=server.name, transport="stdio")
    try:
        server.run(transport="stdio", show_banner=False)
    finally:
        logger.info("server.stopped", name=server.name)


def generate_client_config() -> dict:
    """Generate an ``mcpServers`` entry launching this server."""
    return {
        "mcpServers": {
            DEFAULT_NAME: {
                "command": sys.executable,
                "args": ["-m", "accesspalette.cli", "serve"],
            }
        }
    }


__all__ = ["DEFAULT_INSTRUCTIONS", "DEFAULT_NAME", "create_server", "generate_client_config", "run_stdio"]
