"""Tool registry: binds tool names to handlers on the FastMCP server."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from x_mcp.errors import DuplicateToolError

logger = logging.getLogger("x_mcp.registry")


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool. The parameter contract is the handler's signature."""

    name: str
    description: str
    handler: Callable[..., Any]


class ToolRegistry:
    """Records tool definitions and forwards them to the MCP server."""

    def __init__(self, server: FastMCP) -> None:
        self.server = server
        self._tools: dict[str, ToolDefinition] = {}

    def register(self, definition: ToolDefinition) -> None:
        if definition.name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {definition.name}")
        self._tools[definition.name] = definition
        self.server.add_tool(
            definition.handler,
            name=definition.name,
            description=definition.description,
        )
        logger.debug("Registered tool %s", definition.name)

    def tool(self, name: str, description: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator form of :meth:`register`."""
        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            self.register(ToolDefinition(name=name, description=description, handler=fn))
            return fn
        return decorator

    def get(self, name: str) -> ToolDefinition:
        definition = self._tools.get(name)
        if definition is None:
            raise KeyError(f"Unknown tool: {name}")
        return definition

    @property
    def definitions(self) -> list[ToolDefinition]:
        return list(self._tools.values())

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
