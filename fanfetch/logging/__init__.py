"""Logging setup for fanfetch."""

from fanfetch.logging.setup import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
