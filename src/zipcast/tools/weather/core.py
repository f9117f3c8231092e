"""
Weather pipeline - ZIP code to daily forecast via zippopotam.us and Open-Meteo.

Each lookup is two sequential requests: the ZIP code is geocoded first,
then the daily forecast for those coordinates is fetched. Nothing is cached
or retried.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, Field

from zipcast.config import Config, get_config
from zipcast.tools.weather.exceptions import FetchError, GeocodeError, RangeError

logger = logging.getLogger(__name__)

# Open-Meteo free tier serves today plus 16 days
MAX_DAYS_AHEAD = 16

DAILY_FIELDS = (
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "weather_code",
)

UNKNOWN_CONDITION = "Unknown"

# WMO weather interpretation codes
WEATHER_CODES = MappingProxyType({
    0: "Clear sky", 1: "Mainly clear", 2: "Partly cloudy", 3: "Overcast",
    45: "Foggy", 48: "Depositing rime fog",
    51: "Light drizzle", 53: "Moderate drizzle", 55: "Dense drizzle",
    61: "Slight rain", 63: "Moderate rain", 65: "Heavy rain",
    71: "Slight snow", 73: "Moderate snow", 75: "Heavy snow", 77: "Snow grains",
    80: "Slight rain showers", 81: "Moderate rain showers", 82: "Violent rain showers",
    85: "Slight snow showers", 86: "Heavy snow showers",
    95: "Thunderstorm", 96: "Thunderstorm with slight hail", 99: "Thunderstorm with heavy hail",
})


class Coordinates(BaseModel):
    """A resolved geographic point."""
    lat: float = Field(ge=-90, le=90, allow_inf_nan=False)
    lon: float = Field(ge=-180, le=180, allow_inf_nan=False)


class ForecastRecord(BaseModel):
    """One day of the daily forecast. Temperatures in °F, precipitation in mm."""
    date: str
    max_temp: float
    min_temp: float
    precipitation: float
    weather_code: int = Field(ge=0)
    description: str


def describe_weather_code(code: int) -> str:
    """Convert WMO weather code to human-readable description.

    Example:
        >>> describe_weather_code(1)
        'Mainly clear'
        >>> describe_weather_code(42)
        'Unknown'
    """
    return WEATHER_CODES.get(code, UNKNOWN_CONDITION)


def _get_json(url: str, timeout: Optional[float]) -> Any:
    logger.debug("GET %s", url)
    with urllib.request.urlopen(url, timeout=timeout) as resp:
        return json.loads(resp.read())


def resolve_coordinates(postal_code: str, config: Config | None = None) -> Coordinates:
    """Get coordinates for a U.S. ZIP code.

    Args:
        postal_code: 5-digit ZIP code.
        config: Service settings; the loaded user config when omitted.

    Raises:
        GeocodeError: Service unreachable, non-2xx answer, no matching place,
            or unusable latitude/longitude.
    """
    config = config or get_config()
    base_url = config.require("geocode_url").rstrip("/")
    url = f"{base_url}/{urllib.parse.quote(postal_code, safe='')}"

    try:
        data = _get_json(url, config.get("timeout"))
    except urllib.error.HTTPError as e:
        logger.warning("Geocode lookup for %s failed with HTTP %s", postal_code, e.code)
        raise GeocodeError(
            f"Failed to fetch coordinates for ZIP code {postal_code} (HTTP {e.code})"
        ) from e
    except (OSError, ValueError) as e:
        # URLError and timeouts are OSErrors, bad JSON is a ValueError
        logger.warning("Geocode lookup for %s failed: %s", postal_code, e)
        raise GeocodeError(f"Failed to fetch coordinates for ZIP code {postal_code}: {e}") from e

    places = data.get("places") if isinstance(data, dict) else None
    if not places:
        raise GeocodeError(f"No places found for ZIP code {postal_code}")

    place = places[0]
    try:
        return Coordinates(lat=float(place["latitude"]), lon=float(place["longitude"]))
    except (KeyError, TypeError, ValueError) as e:
        raise GeocodeError(f"Invalid coordinates returned for ZIP code {postal_code}") from e


def _check_day_offset(day_offset: Any) -> None:
    if isinstance(day_offset, bool) or not isinstance(day_offset, int):
        raise RangeError(f"days ahead must be an integer, got {day_offset!r}")
    if not 0 <= day_offset <= MAX_DAYS_AHEAD:
        raise RangeError(
            f"days ahead must be between 0 and {MAX_DAYS_AHEAD} "
            f"(Open-Meteo free tier limit), got {day_offset}"
        )


def _as_weather_code(value: Any) -> int:
    """Whole-number weather code; 3.0 is accepted, 1.7 is not."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"weather code {value!r} is not a number")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"weather code {value!r} is not a whole number")
    return int(value)


def fetch_forecast(
    lat: float,
    lon: float,
    day_offset: int,
    config: Config | None = None,
) -> ForecastRecord:
    """Get the forecast for one day, ``day_offset`` days from today.

    Requests exactly ``day_offset + 1`` days and picks the last one
    (0 = today, 1 = tomorrow, ... 16).

    Raises:
        RangeError: ``day_offset`` outside 0..16; raised before any request.
        FetchError: Service unreachable, non-2xx answer, or a daily series
            too short or malformed to hold the requested day.
    """
    _check_day_offset(day_offset)
    config = config or get_config()

    params = {
        "latitude": lat,
        "longitude": lon,
        "daily": ",".join(DAILY_FIELDS),
        "temperature_unit": "fahrenheit",
        "timezone": config.require("timezone"),
        "forecast_days": day_offset + 1,
    }
    url = f"{config.require('forecast_url')}?{urllib.parse.urlencode(params, safe=',/')}"

    try:
        data = _get_json(url, config.get("timeout"))
    except urllib.error.HTTPError as e:
        logger.warning("Forecast request failed with HTTP %s", e.code)
        raise FetchError(f"Failed to fetch weather data (HTTP {e.code})") from e
    except (OSError, ValueError) as e:
        logger.warning("Forecast request failed: %s", e)
        raise FetchError(f"Failed to fetch weather data: {e}") from e

    try:
        daily = data["daily"]
        code = _as_weather_code(daily["weather_code"][day_offset])
        return ForecastRecord(
            date=daily["time"][day_offset],
            max_temp=daily["temperature_2m_max"][day_offset],
            min_temp=daily["temperature_2m_min"][day_offset],
            precipitation=daily["precipitation_sum"][day_offset],
            weather_code=code,
            description=describe_weather_code(code),
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise FetchError(f"Malformed forecast response for day {day_offset}: {e}") from e


def _fmt_number(value: float) -> str:
    return f"{value:g}"


def format_forecast(record: ForecastRecord) -> str:
    """Format a forecast record as a readable multi-line block."""
    return "\n".join([
        f"Weather Forecast for {record.date}",
        f"Condition: {record.description}",
        f"High: {_fmt_number(record.max_temp)}°F",
        f"Low: {_fmt_number(record.min_temp)}°F",
        f"Precipitation: {_fmt_number(record.precipitation)} mm",
        f"Description: {record.description}",
    ])


def get_forecast_by_zip(
    postal_code: str,
    day_offset: int,
    config: Config | None = None,
) -> ForecastRecord:
    """Geocode ``postal_code`` and fetch the forecast ``day_offset`` days ahead."""
    _check_day_offset(day_offset)
    config = config or get_config()
    coords = resolve_coordinates(postal_code, config)
    return fetch_forecast(coords.lat, coords.lon, day_offset, config)


def get_readable_forecast(
    postal_code: str,
    day_offset: int,
    config: Config | None = None,
) -> str:
    """Forecast for a ZIP code, formatted for display.

    Errors from either lookup propagate unchanged.
    """
    return format_forecast(get_forecast_by_zip(postal_code, day_offset, config))
