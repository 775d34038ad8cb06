"""Named tool handlers exposed by the MCP host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """A tool name, its description and the typed handler serving it."""

    name: str
    description: str
    handler: Callable[..., str]


class ToolRegistry:
    """Registry mapping tool names to handlers."""

    def __init__(self, tools: Iterable[ToolSpec]):
        self._tools: dict[str, ToolSpec] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Duplicate tool name: {tool.name!r}")
            self._tools[tool.name] = tool

    def get(self, name: str) -> ToolSpec:
        try:
            return self._tools[name]
        except KeyError as exc:
            raise KeyError(f"Unknown tool: {name!r}") from exc

    def names(self) -> List[str]:
        return list(self._tools.keys())

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


__all__ = ["ToolRegistry", "ToolSpec"]
