"""
Tools and shared registry for the zipcast package.

Importing this package registers the built-in tools with ``registry``.
"""

# Import registry first
from zipcast.tools._registry import registry

# Built-in tools register themselves on import
from zipcast.tools import weather  # noqa: F401

__all__ = ["registry"]
