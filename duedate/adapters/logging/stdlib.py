"""Stdlib logging adapter.

Implements LoggerPort by forwarding records to a logging.Logger.
"""

import logging

from duedate.core.ports import LoggerPort


class StdlibLoggerAdapter(LoggerPort):
    """Forwards core diagnostics to a standard library logger."""

    def __init__(self, logger: logging.Logger):
        """Initialize the adapter.

        Args:
            logger: Logger that receives every record. Handlers, levels
                and formatting are configured by the caller.
        """
        self.logger = logger

    def log(self, level: int, message: str) -> None:
        """Emit the message on the wrapped logger."""
        self.logger.log(level, message)
