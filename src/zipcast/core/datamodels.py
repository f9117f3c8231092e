"""
Data models for the tool registry.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, ValidationError

from zipcast.config import Config
from zipcast.core.exceptions import ToolValidationError
from zipcast.core.helpers import _error_fields, _format_validation_error


class ToolContext(BaseModel):
    """Execution context handed to a tool by its host.

    The tool treats it as opaque apart from reading ``config``.
    """
    config: Optional[Config] = None
    request_id: Optional[str] = None


class ToolResult(BaseModel):
    """Result of a tool execution."""
    name: str
    arguments: dict[str, Any]
    output: Any


class ToolEntry(BaseModel):
    """Registry entry for a single tool.

    ``callable_fn`` is called as ``callable_fn(params, context)`` where
    ``params`` is an instance of ``params_model``.
    """
    name: str
    description: str
    params_model: type[BaseModel] = Field(exclude=True)
    callable_fn: Callable = Field(exclude=True)
    aliases: list[str] = Field(default_factory=list)

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    def validate_arguments(self, arguments: Any) -> BaseModel:
        """Validate a raw payload against the parameter schema.

        Raises:
            ToolValidationError: Naming every offending field.
        """
        try:
            return self.params_model.model_validate(arguments)
        except ValidationError as e:
            raise ToolValidationError(
                _format_validation_error(self.name, e),
                fields=_error_fields(e),
            ) from e

    def invoke(self, arguments: Any, context: ToolContext | None = None) -> Any:
        """Validate ``arguments`` and run the tool once with the parsed value."""
        params = self.validate_arguments(arguments)
        return self.callable_fn(params, context or ToolContext())

    def parameters_schema(self) -> dict[str, Any]:
        """JSON Schema of the parameters, as consumed by tool-calling hosts."""
        schema = self.params_model.model_json_schema()

        # Clean up Pydantic's schema output
        schema.pop("title", None)
        schema.pop("$defs", None)
        for prop in schema.get("properties", {}).values():
            prop.pop("title", None)
        schema.setdefault("type", "object")
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        schema["additionalProperties"] = False
        return schema

    def to_openai_spec(self) -> dict[str, Any]:
        """Convert to OpenAI-style tool specification."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters_schema(),
            },
        }
