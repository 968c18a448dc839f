"""CourseRegistry - Owns course records and their capacity state."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from registrar.catalog.models import Course
from registrar.exceptions import CapacityError, ValidationError
from registrar.identity import (
    normalize_key,
    normalize_keys,
    require_int,
    validate_identity,
)

logger = logging.getLogger(__name__)

MIN_CREDITS = 1
MAX_CREDITS = 4
MIN_CAPACITY = 10
MAX_CAPACITY = 100
DEFAULT_CAPACITY = 50


class CourseRegistry:
    """Registry of courses keyed by normalized course code.

    Enrollment counts are only changed through increment_enrollment and
    decrement_enrollment, which the enrollment coordinator calls.
    """

    def __init__(self) -> None:
        self._courses: dict[str, Course] = {}

    def __len__(self) -> int:
        return len(self._courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(self.list_courses())

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and normalize_key(code) in self._courses

    def add_course(
        self,
        code: str,
        name: str,
        credits: int,
        max_capacity: int = DEFAULT_CAPACITY,
        prerequisite_codes: Iterable[str] | None = None,
    ) -> Course:
        """Create a new course with no enrollment.

        Args:
            code: Course code, 3-10 alphanumeric characters.
            name: Display name.
            credits: Credit value, 1-4.
            max_capacity: Seat limit, 10-100.
            prerequisite_codes: Codes that must be completed before registering.

        Returns:
            The created Course.

        Raises:
            ValidationError: If any field is invalid, the code already exists,
                or the course lists itself as a prerequisite.
        """
        code = validate_identity(code, "Course code")
        key = normalize_key(code)

        if key in self._courses:
            raise ValidationError(f"Course code '{code}' already exists.")
        credits = require_int(credits, "Credits")
        max_capacity = require_int(max_capacity, "Capacity")
        if credits < MIN_CREDITS or credits > MAX_CREDITS:
            raise ValidationError(
                f"Credits must be between {MIN_CREDITS} and {MAX_CREDITS}."
            )
        if max_capacity < MIN_CAPACITY or max_capacity > MAX_CAPACITY:
            raise ValidationError(
                f"Capacity must be between {MIN_CAPACITY} and {MAX_CAPACITY}."
            )

        prerequisites = normalize_keys(prerequisite_codes)
        if key in prerequisites:
            raise ValidationError("Prerequisites cannot include the course itself.")

        course = Course(
            code=code,
            name=name,
            credits=credits,
            max_capacity=max_capacity,
            prerequisite_codes=prerequisites,
        )
        self._courses[key] = course
        logger.info("Added course %s (%d credits, capacity %d)", code, credits, max_capacity)
        return course

    def get(self, code: str) -> Course | None:
        """Find a course by code, case-insensitively."""
        return self._courses.get(normalize_key(code))

    def list_courses(self) -> list[Course]:
        """List all courses ordered by normalized code."""
        return [self._courses[key] for key in sorted(self._courses)]

    def is_full(self, course: Course) -> bool:
        """Whether the course has no seats left."""
        return course.current_enrollment >= course.max_capacity

    def has_prerequisites(self, course: Course, completed: Iterable[str]) -> bool:
        """Whether every prerequisite of the course appears in completed."""
        if not course.prerequisite_codes:
            return True
        return course.prerequisite_codes <= normalize_keys(completed)

    def increment_enrollment(self, course: Course) -> None:
        """Take one seat in the course.

        Raises:
            CapacityError: If the course is already full.
        """
        if self.is_full(course):
            raise CapacityError(f"Course {course.code} is full.")
        course.current_enrollment += 1

    def decrement_enrollment(self, course: Course) -> None:
        """Release one seat in the course. Never goes below zero."""
        if course.current_enrollment > 0:
            course.current_enrollment -= 1
