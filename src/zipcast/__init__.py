"""
zipcast - ZIP code weather forecasts as a schema-validated tool

Resolves a U.S. ZIP code to coordinates (zippopotam.us), fetches the daily
forecast for those coordinates (Open-Meteo), and exposes the lookup as the
``weatherForcasting`` tool for tool-calling hosts such as MCP clients.

Example usage:
    from zipcast import get_readable_forecast

    print(get_readable_forecast("02148", 1))

    from zipcast.tools import registry

    registry.execute("weatherForcasting", {"zipcode": "02148", "daysAhead": 1})
"""

__version__ = "0.1.0"

from zipcast.core import (
    ToolContext,
    ToolEntry,
    ToolError,
    ToolNotFoundError,
    ToolRegistry,
    ToolResult,
    ToolValidationError,
    create_tool,
)
from zipcast.tools.weather import (
    FetchError,
    GeocodeError,
    RangeError,
    WeatherError,
    get_readable_forecast,
)


# Tools registry (lazy import to avoid circular imports)
def __getattr__(name):
    if name == "registry":
        from zipcast.tools import registry
        return registry
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",
    # Core
    "ToolRegistry",
    "ToolEntry",
    "ToolContext",
    "ToolResult",
    "ToolError",
    "ToolNotFoundError",
    "ToolValidationError",
    "create_tool",
    # Weather
    "WeatherError",
    "RangeError",
    "GeocodeError",
    "FetchError",
    "get_readable_forecast",
    # Tools (lazy loaded)
    "registry",
]
