"""
Exception classes for the tool registry.
"""


class ToolError(Exception):
    """Base exception for tool-related errors."""


class ToolNotFoundError(ToolError):
    """Tool not found in registry."""


class ToolValidationError(ToolError):
    """Tool argument validation failed.

    Attributes:
        fields: Dotted paths of the offending fields (e.g. ``["daysAhead"]``).
    """

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = list(fields or [])
