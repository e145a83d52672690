"""Exceptions raised by the due-date calculation core."""


class DueDateError(Exception):
    """Base class for every error raised by the duedate core."""


class InvalidTaskDateError(DueDateError):
    """The task start date falls outside working hours (9am-5pm Mon-Fri)."""


class TaskHandlerError(DueDateError):
    """Any other failure while handling a task.

    Raised for a non-positive task length and for internal consistency
    failures in the due date calculation.
    """
