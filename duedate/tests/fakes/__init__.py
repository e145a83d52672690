"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeLoggerPort: Captured log records for assertion
"""

from .logger import FakeLoggerPort

__all__ = [
    "FakeLoggerPort",
]
