"""Due date calculation for tasks measured in working hours."""

from duedate.core import (
    DueDateCalculator,
    DueDateError,
    InvalidTaskDateError,
    Task,
    TaskHandlerError,
)

__all__ = [
    "DueDateCalculator",
    "DueDateError",
    "InvalidTaskDateError",
    "Task",
    "TaskHandlerError",
]
