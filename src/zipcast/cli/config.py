#!/usr/bin/env python3
"""CLI entry point for viewing and editing ~/.zipcast/config.json (zipcast-config command)."""
from __future__ import annotations

import argparse
import sys
from typing import Any


def _parse_value(key: str, value_str: str) -> Any:
    """Convert a command-line string to the type of the key's default."""
    from zipcast.config import DEFAULTS

    current = DEFAULTS.get(key)
    if isinstance(current, bool):
        return value_str.lower() == "true"
    if isinstance(current, int):
        return int(value_str)
    if isinstance(current, float):
        return float(value_str)
    return value_str


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the zipcast-config CLI."""
    parser = argparse.ArgumentParser(
        prog="zipcast-config",
        description="Show or change zipcast settings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    zipcast-config                         # Show customized settings
    zipcast-config get default_zipcode
    zipcast-config set default_zipcode 10001
    zipcast-config set timeout 5
    zipcast-config unset timeout           # Back to the default
    zipcast-config reset                   # Delete the config file
        """,
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("show", help="Show customized settings (default)")
    get_p = sub.add_parser("get", help="Print one setting")
    get_p.add_argument("key")
    set_p = sub.add_parser("set", help="Change one setting")
    set_p.add_argument("key")
    set_p.add_argument("value")
    unset_p = sub.add_parser("unset", help="Reset one setting to its default")
    unset_p.add_argument("key")
    sub.add_parser("reset", help="Reset every setting to its default")

    args = parser.parse_args(argv)

    from zipcast.config import DEFAULTS, Config, get_config_manager

    cfg_mgr = get_config_manager()

    try:
        if args.command in (None, "show"):
            settings = cfg_mgr.list_settings()
            print(f"Config file: {cfg_mgr.CONFIG_FILE}")
            if settings:
                for key, value in settings.items():
                    print(f"  {key}: {value}")
            else:
                print("  (no custom settings)")
        elif args.command == "get":
            if args.key not in Config.model_fields:
                raise ValueError(f"Unknown config key: {args.key}")
            print(cfg_mgr.get(args.key))
        elif args.command == "set":
            value = _parse_value(args.key, args.value)
            cfg_mgr.set(args.key, value)
            print(f"Set {args.key} = {value}")
        elif args.command == "unset":
            cfg_mgr.unset(args.key)
            print(f"Deleted {args.key} (default: {DEFAULTS.get(args.key)})")
        elif args.command == "reset":
            cfg_mgr.reset()
            print("Configuration reset to defaults")
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
