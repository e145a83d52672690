"""Stepping of a timestamp through working hours.

This module implements the rule that moves a start instant forward by a
number of working hours, skipping nights and weekends.
"""

import logging
from datetime import datetime, timedelta

from .exceptions import TaskHandlerError
from .ports import LoggerPort
from .working_hours import (
    NON_WORKING_HOURS,
    SATURDAY,
    SUNDAY,
    WORK_DAY_END_HOUR,
    WorkingHoursPolicy,
)


class DueDateAdvancer:
    """Moves a timestamp forward by N working hours.

    Arithmetic is done on the wall clock of the timestamp's own zone, so
    the working-hours checks always see the caller's local time.
    """

    def __init__(self, logger: LoggerPort):
        self.logger = logger

    def advance(self, start: datetime, hours_remaining: int) -> datetime:
        """Return the instant `hours_remaining` working hours after `start`.

        Each pass of the loop either skips a weekend day, consumes the
        rest of the current work day plus the night, or consumes the
        final hours. Once the counter reaches zero the instant is rolled
        past the night if it landed outside the work window.

        Raises:
            TaskHandlerError: If called with a negative hour count.
        """
        if hours_remaining < 0:
            self.logger.log(
                logging.CRITICAL,
                "Date has been miscalculated, please investigate! "
                f"Remaining hours: {hours_remaining}",
            )
            raise TaskHandlerError("Error in due date calculation")

        due_date = start
        while True:
            weekday = due_date.weekday()
            if weekday == SATURDAY:
                due_date += timedelta(days=2)
                continue
            if weekday == SUNDAY:
                due_date += timedelta(days=1)
                continue

            if hours_remaining == 0:
                if WorkingHoursPolicy.is_working_time(due_date):
                    return due_date
                # Landed after closing time; same clock time next day
                due_date += timedelta(hours=NON_WORKING_HOURS)
                continue

            hours_left_in_day = WORK_DAY_END_HOUR - due_date.hour
            if hours_remaining > hours_left_in_day:
                due_date += timedelta(hours=hours_left_in_day + NON_WORKING_HOURS)
                hours_remaining -= hours_left_in_day
            else:
                due_date += timedelta(hours=hours_remaining)
                hours_remaining = 0
