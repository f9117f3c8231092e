#!/usr/bin/env python3
"""CLI entry point for one-off forecasts (zipcast command).

Missing arguments fall back to the default_zipcode and default_days
settings in ~/.zipcast/config.json.
"""
from __future__ import annotations

import argparse
import logging
import sys


def _parse_days(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"days must be an integer, got {value!r}") from None


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the zipcast CLI."""
    parser = argparse.ArgumentParser(
        prog="zipcast",
        description="Weather forecast for a U.S. ZIP code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    zipcast                 # Default ZIP code, tomorrow
    zipcast 10001           # New York, tomorrow
    zipcast 10001 0         # New York, today
    zipcast 94103 16        # San Francisco, 16 days from today (maximum)
        """,
    )
    parser.add_argument("zipcode", nargs="?", help="5-digit US ZIP code")
    parser.add_argument("days", nargs="?", help="Days from today, 0-16")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    print("🌤️  Weather Forecast CLI\n")

    try:
        # Import here to avoid loading everything for --help
        from zipcast.config import get_config
        from zipcast.tools.weather import get_readable_forecast

        config = get_config()
        zipcode = args.zipcode or config.require("default_zipcode")
        days = _parse_days(args.days) if args.days else config.require("default_days")

        plural = "" if days == 1 else "s"
        print(f"Fetching weather for ZIP code {zipcode} ({days} day{plural} from today)...\n")
        print(get_readable_forecast(zipcode, days, config))

    except KeyboardInterrupt:
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
