"""
CLI module for the zipcast package.

Provides the weather lookup and MCP server command-line interfaces.
"""
