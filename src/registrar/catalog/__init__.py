"""Course catalog - Course records, capacity and prerequisites."""

from registrar.catalog.models import Course
from registrar.catalog.registry import CourseRegistry

__all__ = [
    "Course",
    "CourseRegistry",
]
