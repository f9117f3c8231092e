"""
Tool Registry for managing and executing tools.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from pydantic import BaseModel

from zipcast.core.datamodels import ToolContext, ToolEntry, ToolResult
from zipcast.core.exceptions import ToolError, ToolNotFoundError
from zipcast.core.helpers import _normalize_name

logger = logging.getLogger(__name__)


def create_tool(
    name: str,
    description: str,
    schema: type[BaseModel],
    execute: Callable[[Any, ToolContext], Any],
    aliases: list[str] | None = None,
) -> ToolEntry:
    """
    Wrap ``execute`` as a schema-validated tool.

    Usage:
        class Params(BaseModel):
            x: int = Field(description="A number")

        entry = create_tool("double", "Double a number", Params,
                            lambda params, ctx: params.x * 2)
        entry.invoke({"x": 2})  # -> 4
    """
    if not isinstance(name, str) or not name.strip():
        raise ToolError("Tool name must be a non-empty string")
    if not isinstance(description, str) or not description.strip():
        raise ToolError(f"Tool '{name}' needs a non-empty description")
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise ToolError(f"Tool '{name}' schema must be a pydantic model class")
    if not callable(execute):
        raise ToolError(f"Tool '{name}' execute function is not callable")

    return ToolEntry(
        name=_normalize_name(name),
        description=description.strip(),
        params_model=schema,
        callable_fn=execute,
        aliases=[_normalize_name(a) for a in (aliases or [])],
    )


class ToolRegistry:
    """Registry for managing tools."""

    def __init__(self):
        self._tools: dict[str, ToolEntry] = {}
        self._aliases: dict[str, str] = {}

    def add(self, entry: ToolEntry) -> ToolEntry:
        """Add a tool entry; names and aliases must be unique."""
        if entry.name in self._tools:
            raise ToolError(f"Tool name collision: {entry.name}")

        for alias in entry.aliases:
            if alias in self._aliases and self._aliases[alias] != entry.name:
                raise ToolError(f"Alias collision: {alias} -> {self._aliases[alias]}")

        self._tools[entry.name] = entry
        for alias in entry.aliases:
            self._aliases[alias] = entry.name

        logger.debug("Registered tool %s", entry.name)
        return entry

    def register(
        self,
        *,
        name: str,
        description: str,
        schema: type[BaseModel],
        aliases: list[str] | None = None,
    ) -> Callable:
        """
        Decorator form of create_tool() + add().

        Usage:
            @registry.register(name="weatherForcasting", description="...",
                               schema=WeatherForecastParams)
            def forecast(params, context): ...
        """
        def decorator(func: Callable) -> Callable:
            entry = self.add(create_tool(name, description, schema, func, aliases))

            # Attach metadata to function
            func.__tool_name__ = entry.name
            func.__tool_aliases__ = entry.aliases

            return func

        return decorator

    def get(self, name_or_alias: str) -> ToolEntry:
        """Resolve a tool by name or alias."""
        key = _normalize_name(name_or_alias)
        canonical = self._aliases.get(key, key)

        if canonical not in self._tools:
            raise ToolNotFoundError(f"Unknown tool: {name_or_alias}")

        return self._tools[canonical]

    def execute(
        self,
        name: str,
        arguments: dict[str, Any],
        context: ToolContext | None = None,
    ) -> ToolResult:
        """Execute a tool with the given arguments."""
        entry = self.get(name)
        output = entry.invoke(arguments, context)

        return ToolResult(
            name=entry.name,
            arguments=arguments,
            output=output,
        )

    def to_openai_tools(self) -> list[dict[str, Any]]:
        """Get all tools as OpenAI-style tool specs."""
        return [entry.to_openai_spec() for entry in self._tools.values()]

    def __contains__(self, name: str) -> bool:
        try:
            self.get(name)
            return True
        except ToolNotFoundError:
            return False

    def __iter__(self):
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
