"""Working-hours policy for task scheduling.

Work happens Monday to Friday between 09:00:00 and 17:00:00. Both ends
of the window are valid instants; anything after 17:00:00 is not.
Holidays are not modeled.
"""

from datetime import datetime, time

WORK_DAY_START_HOUR = 9
WORK_DAY_END_HOUR = 17
NON_WORKING_HOURS = 24 - (WORK_DAY_END_HOUR - WORK_DAY_START_HOUR)

# datetime.weekday() values
SATURDAY = 5
SUNDAY = 6
WEEKEND_DAYS = frozenset({SATURDAY, SUNDAY})

_WORK_DAY_START = time(WORK_DAY_START_HOUR)
_WORK_DAY_END = time(WORK_DAY_END_HOUR)


class WorkingHoursPolicy:
    """Decides whether task inputs and results respect working hours.

    Pure decision logic — no side effects.
    All methods are static as the class carries no state.
    """

    @staticmethod
    def truncate_to_seconds(target: datetime) -> datetime:
        """Drop sub-second precision so comparisons ignore microseconds."""
        return target.replace(microsecond=0)

    @staticmethod
    def is_working_time(target: datetime) -> bool:
        """Is this instant inside the Mon-Fri 09:00:00-17:00:00 window?

        Used for both task inputs and calculation results.
        Microseconds are ignored, so 17:00:00.5 still counts as 17:00:00.
        """
        if target.weekday() in WEEKEND_DAYS:
            return False

        time_of_day = WorkingHoursPolicy.truncate_to_seconds(target).time()
        return _WORK_DAY_START <= time_of_day <= _WORK_DAY_END

    @staticmethod
    def is_valid_duration(duration_hours: int) -> bool:
        """A task must need at least one working hour."""
        return duration_hours > 0
