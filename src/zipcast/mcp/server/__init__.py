"""MCP server exposing zipcast tools."""
from __future__ import annotations

from zipcast.mcp.server.server import MCPServer, create_mcp_server

__all__ = ["MCPServer", "create_mcp_server"]
