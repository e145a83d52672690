"""Due date calculation for tasks.

This module coordinates validation of a task against the working-hours
policy, the advancement of its start date, and the final sanity check
on the computed due date.
"""

import logging
from datetime import datetime
from typing import NoReturn

from .advancer import DueDateAdvancer
from .exceptions import InvalidTaskDateError, TaskHandlerError
from .models import Task
from .ports import LoggerPort
from .working_hours import WorkingHoursPolicy


class DueDateCalculator:
    """Calculates task due dates.

    Only accounts for working hours (9am-5pm) Mon-Fri; weekends are
    skipped and holidays ignored. Holds no per-call state, so one
    instance can serve many threads.
    """

    def __init__(self, logger: LoggerPort | None = None):
        """Initialize the calculator.

        Args:
            logger: LoggerPort used to report rejected inputs and
                internal errors. Defaults to the stdlib logger for
                this module.
        """
        if logger is None:
            from duedate.adapters.logging.stdlib import StdlibLoggerAdapter

            logger = StdlibLoggerAdapter(logging.getLogger(__name__))
        self.logger = logger
        self.advancer = DueDateAdvancer(logger)

    def calculate_due_date(self, task: Task) -> datetime:
        """Calculate when a task will be finished.

        Steps:
        1. Validate the start date (seconds precision)
        2. Validate the task length
        3. Advance the start date by the task length in working hours
        4. Re-check the result against working hours
        5. Express the result in the start date's time zone

        Raises:
            InvalidTaskDateError: If the start date is outside working
                hours or carries no time zone.
            TaskHandlerError: If the task length is not positive, or the
                calculation produced an invalid due date.
        """
        start_date = task.start_date
        if start_date.tzinfo is None or start_date.utcoffset() is None:
            self._reject_start_date(start_date)

        working_date = WorkingHoursPolicy.truncate_to_seconds(start_date)
        if not WorkingHoursPolicy.is_working_time(working_date):
            self._reject_start_date(start_date)

        task_length = task.duration_hours
        if not WorkingHoursPolicy.is_valid_duration(task_length):
            self.logger.log(
                logging.CRITICAL, f"Invalid task length provided: {task_length}"
            )
            raise TaskHandlerError(
                f"Invalid task length: {task_length}. Value must be greater than zero."
            )

        due_date = self.advancer.advance(working_date, task_length)

        # Surface unexpected bad calculations
        if not WorkingHoursPolicy.is_working_time(due_date):
            self.logger.log(
                logging.CRITICAL, f"Invalid calculated result: {due_date.isoformat()}"
            )
            raise TaskHandlerError(
                "An error has occurred while calculating task due date"
            )

        return due_date.astimezone(start_date.tzinfo)

    def _reject_start_date(self, start_date: datetime) -> NoReturn:
        """Log and raise for a start date outside working hours."""
        self.logger.log(
            logging.CRITICAL,
            f"Invalid start date provided: {start_date.isoformat()}",
        )
        raise InvalidTaskDateError(
            f"The provided date was invalid: {start_date.isoformat()}. "
            "Please ensure date is within working hours 9am-5pm Mon-Fri."
        )
