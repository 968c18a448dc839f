"""Student records - Completed history and current registrations."""

from registrar.students.models import Student
from registrar.students.registry import StudentRegistry

__all__ = [
    "Student",
    "StudentRegistry",
]
