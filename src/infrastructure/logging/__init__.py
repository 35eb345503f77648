"""Logging adapters implementing LoggerProtocol.

Usage:
    from src.infrastructure.logging import ConsoleAdapter
"""

from src.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
