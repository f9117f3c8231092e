#!/usr/bin/env python3
"""CLI entry point for running zipcast as an MCP server (zipcast-mcp-server command).

This exposes the weather tool to MCP clients like Claude Desktop.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the zipcast-mcp-server CLI."""
    parser = argparse.ArgumentParser(
        prog="zipcast-mcp-server",
        description="Run zipcast tools as an MCP server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    zipcast-mcp-server                    # Run with stdio transport (default)
    zipcast-mcp-server --transport sse    # Run with SSE transport
    zipcast-mcp-server --list-tools       # List available tools
    zipcast-mcp-server -l --json          # Tool specs as JSON

To use with Claude Desktop, add to your MCP settings:
    {
      "mcpServers": {
        "zipcast": {
          "command": "zipcast-mcp-server"
        }
      }
    }
        """,
    )
    parser.add_argument(
        "--transport", "-t",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport type (default: stdio)"
    )
    parser.add_argument(
        "--name", "-n",
        default="zipcast",
        help="Server name (default: zipcast)"
    )
    parser.add_argument(
        "--list-tools", "-l",
        action="store_true",
        help="List available tools and exit"
    )
    parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="With --list-tools, print OpenAI-style tool specs as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    try:
        # Import here to avoid loading everything for --help
        from zipcast.tools import registry

        if args.list_tools:
            if args.as_json:
                print(json.dumps(registry.to_openai_tools(), indent=2))
                return
            print("Available tools:")
            for entry in registry:
                print(f"  {entry.name}")
                print(f"    {entry.description}")
                for field, prop in entry.parameters_schema()["properties"].items():
                    print(f"      {field} ({prop.get('type', 'any')}): {prop.get('description', '')}")
            return

        from zipcast.mcp import close_file_logging, configure_file_logging, create_mcp_server

        log_path = configure_file_logging(
            args.name, level=logging.DEBUG if args.verbose else logging.INFO
        )
        if args.verbose:
            print(f"Logging to {log_path}", file=sys.stderr)

        try:
            server = create_mcp_server(registry=registry, name=args.name)
            server.run(transport=args.transport)
        finally:
            close_file_logging()

    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
