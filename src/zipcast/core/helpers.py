"""
Helper functions for the tool registry.
"""

from __future__ import annotations

import re

from pydantic import ValidationError


def _normalize_name(name: str) -> str:
    """Normalize tool name to valid identifier."""
    name = (name or "").strip()
    return re.sub(r"[^a-zA-Z0-9_]+", "_", name)


def _error_fields(error: ValidationError) -> list[str]:
    """List the offending field paths of a pydantic ValidationError, in order."""
    fields: list[str] = []
    for item in error.errors():
        path = ".".join(str(part) for part in item.get("loc", ())) or "__root__"
        if path not in fields:
            fields.append(path)
    return fields


def _format_validation_error(tool_name: str, error: ValidationError) -> str:
    """One line per error: ``field: message``."""
    lines = [f"Invalid arguments for tool '{tool_name}':"]
    for item in error.errors():
        path = ".".join(str(part) for part in item.get("loc", ())) or "__root__"
        lines.append(f"  {path}: {item.get('msg', 'invalid value')}")
    return "\n".join(lines)
