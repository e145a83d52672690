"""Logging adapters implementing LoggerPort."""

from .stdlib import StdlibLoggerAdapter

__all__ = ["StdlibLoggerAdapter"]
