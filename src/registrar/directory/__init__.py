"""Directory - Facade over the course and student registries."""

from registrar.directory.directory import Directory
from registrar.directory.models import (
    CourseListing,
    ScheduleEntry,
    StudentSchedule,
    Summary,
)

__all__ = [
    "CourseListing",
    "Directory",
    "ScheduleEntry",
    "StudentSchedule",
    "Summary",
]
