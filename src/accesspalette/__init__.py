"""Accessible color tooling served over MCP."""

__version__ = "0.1.0"
