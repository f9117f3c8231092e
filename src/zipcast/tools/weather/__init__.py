"""
Weather tool implementation.
"""

from pydantic import BaseModel, Field

from zipcast.core import ToolContext
from zipcast.tools._registry import registry
from zipcast.tools.weather.core import (
    MAX_DAYS_AHEAD,
    WEATHER_CODES,
    Coordinates,
    ForecastRecord,
    describe_weather_code,
    fetch_forecast,
    format_forecast,
    get_forecast_by_zip,
    get_readable_forecast,
    resolve_coordinates,
)
from zipcast.tools.weather.exceptions import (
    FetchError,
    GeocodeError,
    RangeError,
    WeatherError,
)


class WeatherForecastParams(BaseModel):
    """Parameters of the weatherForcasting tool."""

    model_config = {"extra": "forbid"}

    zipcode: str = Field(description="5-digit US zipcode")
    daysAhead: int = Field(strict=True, description="number of days ahead to forecast")


@registry.register(
    name="weatherForcasting",
    description="Get the weather forecast for a U.S. zipcode for N days ahead",
    schema=WeatherForecastParams,
)
def weather_forecasting(params: WeatherForecastParams, context: ToolContext) -> str:
    return get_readable_forecast(params.zipcode, params.daysAhead, context.config)


__all__ = [
    "MAX_DAYS_AHEAD",
    "WEATHER_CODES",
    "Coordinates",
    "FetchError",
    "ForecastRecord",
    "GeocodeError",
    "RangeError",
    "WeatherError",
    "WeatherForecastParams",
    "describe_weather_code",
    "fetch_forecast",
    "format_forecast",
    "get_forecast_by_zip",
    "get_readable_forecast",
    "resolve_coordinates",
    "weather_forecasting",
]
