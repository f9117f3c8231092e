"""MCP-specific exceptions."""
from __future__ import annotations


class MCPError(Exception):
    """Base exception for MCP-related errors."""
    pass


class MCPToolError(MCPError):
    """Error executing a tool on behalf of an MCP client."""
    pass
