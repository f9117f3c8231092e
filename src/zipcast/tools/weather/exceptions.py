"""
Exception classes for the weather pipeline.
"""


class WeatherError(Exception):
    """Base exception for weather lookups."""


class RangeError(WeatherError, ValueError):
    """Day offset outside the window the forecast provider serves."""


class GeocodeError(WeatherError):
    """ZIP code could not be resolved to coordinates."""


class FetchError(WeatherError):
    """Forecast service unreachable, failed, or returned unusable data."""
