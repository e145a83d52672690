"""Domain models for the duedate system.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Task:
    """A unit of work that starts at a given instant and needs N working hours.

    Nothing is validated on creation. The calculator checks the start
    date and duration when a due date is requested.
    """

    start_date: datetime  # zone-aware; the zone is carried into the due date
    duration_hours: int
