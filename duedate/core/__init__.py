"""Core domain logic for the duedate system.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .calculator import DueDateCalculator
from .exceptions import DueDateError, InvalidTaskDateError, TaskHandlerError
from .models import Task

__all__ = [
    "DueDateCalculator",
    "DueDateError",
    "InvalidTaskDateError",
    "Task",
    "TaskHandlerError",
]
