"""Enrollment - Registration rules and the shared result type."""

from registrar.enrollment.coordinator import EnrollmentCoordinator
from registrar.enrollment.models import ErrorKind, Outcome

__all__ = [
    "EnrollmentCoordinator",
    "ErrorKind",
    "Outcome",
]
