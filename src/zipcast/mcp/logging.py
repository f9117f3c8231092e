"""MCP logging configuration.

An MCP server on stdio owns stdout, so its logs go to a file instead:
~/.zipcast/logs/<server-name>.log
"""
from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Optional

# Directory for log files
LOGS_DIR = Path.home() / ".zipcast" / "logs"

LOGGER_NAME = "zipcast"

# Module-level state
_file_handler: Optional[logging.FileHandler] = None


def get_log_path(server_name: str) -> Path:
    """Get the log file path for a server, creating the logs directory."""
    LOGS_DIR.mkdir(parents=True, exist_ok=True)
    return LOGS_DIR / f"{server_name}.log"


def configure_file_logging(
    server_name: str,
    level: int = logging.INFO,
) -> Path:
    """Send zipcast logs to the server's log file.

    Replaces any handler installed by a previous call.

    Returns:
        Path to the log file
    """
    global _file_handler

    log_path = get_log_path(server_name)
    close_file_logging()

    _file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    _file_handler.setLevel(level)
    _file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    root = logging.getLogger(LOGGER_NAME)
    root.addHandler(_file_handler)
    root.setLevel(level)

    root.info("=== Server started: %s ===", server_name)
    return log_path


def close_file_logging() -> None:
    """Flush and detach the file handler, if any."""
    global _file_handler

    if _file_handler is not None:
        root = logging.getLogger(LOGGER_NAME)
        root.info("=== Server stopped ===")
        root.removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None


def log_tool_exception(error: Exception, context: str = "") -> str:
    """Log a tool failure with its traceback and return a one-line message.

    Args:
        error: The exception to log
        context: What was happening, e.g. "weatherForcasting"

    Returns:
        User-friendly error message (without traceback)
    """
    logger = logging.getLogger("zipcast.mcp")

    error_type = type(error).__name__
    user_msg = f"{context}: {error}" if context else f"{error_type}: {error}"

    tb_str = traceback.format_exc()
    logger.error("%s\n%s: %s\n\nTraceback:\n%s", context, error_type, error, tb_str)

    return user_msg
