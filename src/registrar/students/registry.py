"""StudentRegistry - Owns student records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from registrar.exceptions import ValidationError
from registrar.identity import (
    normalize_key,
    normalize_keys,
    require_int,
    validate_identity,
)
from registrar.students.models import Student

logger = logging.getLogger(__name__)

MIN_CREDIT_LIMIT = 1
MAX_CREDIT_LIMIT = 24
DEFAULT_CREDIT_LIMIT = 18


class StudentRegistry:
    """Registry of students keyed by normalized student id."""

    def __init__(self) -> None:
        self._students: dict[str, Student] = {}

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students.values())

    def __contains__(self, student_id: object) -> bool:
        return isinstance(student_id, str) and normalize_key(student_id) in self._students

    def add_student(
        self,
        student_id: str,
        name: str,
        major: str,
        max_credits: int = DEFAULT_CREDIT_LIMIT,
        completed_courses: Iterable[str] | None = None,
    ) -> Student:
        """Create a new student with an empty schedule.

        Args:
            student_id: Student id, 3-10 alphanumeric characters.
            name: Display name.
            major: Declared major.
            max_credits: Credit limit, 1-24.
            completed_courses: Codes of courses already completed.

        Returns:
            The created Student.

        Raises:
            ValidationError: If the id is invalid or taken, or the credit
                limit is out of range.
        """
        student_id = validate_identity(student_id, "Student ID")
        key = normalize_key(student_id)

        if key in self._students:
            raise ValidationError(f"Student ID '{student_id}' already exists.")
        max_credits = require_int(max_credits, "Max credits")
        if max_credits > MAX_CREDIT_LIMIT:
            raise ValidationError(f"Max credits cannot exceed {MAX_CREDIT_LIMIT}.")
        if max_credits < MIN_CREDIT_LIMIT:
            raise ValidationError(f"Max credits must be at least {MIN_CREDIT_LIMIT}.")

        student = Student(
            student_id=student_id,
            name=name,
            major=major,
            max_credits=max_credits,
            completed_courses=normalize_keys(completed_courses),
        )
        self._students[key] = student
        logger.info("Added student %s (max %d credits)", student_id, max_credits)
        return student

    def get(self, student_id: str) -> Student | None:
        """Find a student by id, case-insensitively."""
        return self._students.get(normalize_key(student_id))

    def total_credits(self, student: Student) -> int:
        """Sum of credits over the student's registered courses."""
        return sum(course.credits for course in student.registered_courses)

    def is_registered_for(self, student: Student, code: str) -> bool:
        """Whether the student holds a registration for the course code."""
        key = normalize_key(code)
        return any(course.key == key for course in student.registered_courses)
