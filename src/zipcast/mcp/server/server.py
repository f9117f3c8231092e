"""MCP Server - exposes zipcast tools as an MCP server."""
from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, Optional
from uuid import uuid4

import anyio.to_thread
from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent, Tool

from zipcast.core import ToolContext, ToolError
from zipcast.mcp.exceptions import MCPError, MCPToolError
from zipcast.mcp.logging import log_tool_exception
from zipcast.tools.weather import WeatherError

if TYPE_CHECKING:
    from zipcast.config import Config
    from zipcast.core import ToolRegistry

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "sse")


class RegistryFastMCP(FastMCP):
    """FastMCP whose tools come straight from a ToolRegistry.

    Tools are listed with the registry's own JSON Schema, and call
    arguments reach ``registry.execute`` exactly as the client sent them,
    so the registry's schema is the only validation applied.
    """

    def __init__(
        self,
        name: str,
        registry: "ToolRegistry",
        config: Optional["Config"] = None,
    ):
        self.tool_registry = registry
        self.tool_config = config
        super().__init__(name)

    async def list_tools(self) -> list[Tool]:
        return [
            Tool(
                name=entry.name,
                description=entry.description,
                inputSchema=entry.parameters_schema(),
            )
            for entry in self.tool_registry
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> list[TextContent]:
        context = ToolContext(config=self.tool_config, request_id=uuid4().hex)
        logger.info("Tool call %s [%s]", name, context.request_id)

        # Lookups block on urllib; run them off the event loop
        execute = functools.partial(self.tool_registry.execute, name, arguments or {}, context)
        try:
            result = await anyio.to_thread.run_sync(execute)
        except (ToolError, WeatherError) as e:
            raise MCPToolError(log_tool_exception(e, name)) from e

        return [TextContent(type="text", text=str(result.output))]


class MCPServer:
    """MCP Server that exposes zipcast tools.

    This allows the tools to be used by MCP clients like Claude Desktop.

    Usage:
        from zipcast.tools import registry
        server = MCPServer(registry)
        server.run()  # Runs on stdio by default
    """

    def __init__(
        self,
        registry: "ToolRegistry",
        name: str = "zipcast",
        config: Optional["Config"] = None,
    ):
        self.registry = registry
        self.name = name
        self.config = config
        self._mcp: Optional[RegistryFastMCP] = None

    def _create_server(self) -> RegistryFastMCP:
        """Create the FastMCP server instance."""
        self._mcp = RegistryFastMCP(self.name, self.registry, self.config)
        logger.debug("Exposing tools over MCP: %s", ", ".join(e.name for e in self.registry))
        return self._mcp

    def run(self, transport: str = "stdio") -> None:
        """Run the MCP server.

        Args:
            transport: Transport type - "stdio" or "sse"
        """
        if transport not in TRANSPORTS:
            raise MCPError(f"Unknown transport: {transport}")

        mcp = self._create_server()

        logger.info("Starting MCP server '%s' with %s transport", self.name, transport)
        mcp.run(transport=transport)


def create_mcp_server(
    registry: Optional["ToolRegistry"] = None,
    name: str = "zipcast",
    config: Optional["Config"] = None,
) -> MCPServer:
    """Create an MCP server with the given or default registry.

    Args:
        registry: Tool registry to expose (uses the built-in tools if None)
        name: Server name
        config: Configuration handed to every tool call

    Returns:
        MCPServer instance
    """
    if registry is None:
        from zipcast.tools import registry as default_registry
        registry = default_registry

    return MCPServer(registry, name=name, config=config)
