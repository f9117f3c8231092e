"""
Core module for the zipcast package.

Provides schema-validated tools and the registry that hosts them.
"""

from zipcast.core.datamodels import ToolContext, ToolEntry, ToolResult
from zipcast.core.exceptions import (
    ToolError,
    ToolNotFoundError,
    ToolValidationError,
)
from zipcast.core.registry import ToolRegistry, create_tool

__all__ = [
    # Registry
    "ToolRegistry",
    "create_tool",
    # Models
    "ToolContext",
    "ToolEntry",
    "ToolResult",
    # Exceptions
    "ToolError",
    "ToolNotFoundError",
    "ToolValidationError",
]
