"""Port interfaces for the duedate system.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - LoggerPort: Record severity-tagged diagnostics
"""

from abc import ABC, abstractmethod


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class LoggerPort(ABC):
    """Port for recording diagnostics raised by the core.

    The core only needs to emit a message at a severity level. Adapters
    decide where the record ends up (stdlib logging, a test buffer, etc.).

    Implementations must be safe to call from several threads at once,
    since a single calculator may be shared between threads.
    """

    @abstractmethod
    def log(self, level: int, message: str) -> None:
        """Record a message at the given severity.

        Args:
            level: Severity as a stdlib logging level (e.g. logging.CRITICAL).
            message: Fully formatted message text.
        """
