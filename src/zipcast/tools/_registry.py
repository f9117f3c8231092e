"""Shared registry instance for the built-in tools."""

from zipcast.core import ToolRegistry

registry = ToolRegistry()
