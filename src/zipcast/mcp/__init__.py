"""MCP (Model Context Protocol) support for zipcast.

Exposes the registered tools as an MCP server for use by MCP clients.

    from zipcast.mcp import create_mcp_server

    server = create_mcp_server()
    server.run()  # Runs on stdio
"""
from __future__ import annotations

from zipcast.mcp.exceptions import MCPError, MCPToolError
from zipcast.mcp.logging import (
    close_file_logging,
    configure_file_logging,
    get_log_path,
    log_tool_exception,
)
from zipcast.mcp.server import MCPServer, create_mcp_server

__all__ = [
    # Server
    "MCPServer",
    "create_mcp_server",
    # Exceptions
    "MCPError",
    "MCPToolError",
    # Logging
    "configure_file_logging",
    "close_file_logging",
    "get_log_path",
    "log_tool_exception",
]
