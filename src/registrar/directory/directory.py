"""Directory - Main API for registration operations."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from registrar.catalog import CourseRegistry
from registrar.catalog.registry import DEFAULT_CAPACITY
from registrar.config import ConfigError
from registrar.directory.models import (
    CourseListing,
    ScheduleEntry,
    StudentSchedule,
    Summary,
    course_to_listing,
)
from registrar.enrollment import EnrollmentCoordinator, ErrorKind, Outcome
from registrar.exceptions import ValidationError
from registrar.students import StudentRegistry
from registrar.students.registry import DEFAULT_CREDIT_LIMIT

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from registrar.catalog import Course
    from registrar.config import SeedConfig
    from registrar.students import Student

logger = logging.getLogger(__name__)


class Directory:
    """Main API for registration operations.

    Holds the course and student registries and exposes the commands a
    presentation layer calls. Every command runs under a single lock, so
    register and drop never interleave with another change to either record.
    """

    def __init__(self) -> None:
        self._courses = CourseRegistry()
        self._students = StudentRegistry()
        self._coordinator = EnrollmentCoordinator(self._courses, self._students)
        self._lock = threading.RLock()

    @classmethod
    def from_seed(cls, seed: SeedConfig) -> Directory:
        """Build a directory populated from a seed.

        Args:
            seed: Courses, students and registrations to apply.

        Returns:
            The populated Directory.

        Raises:
            ConfigError: If a seeded record is invalid or a seeded
                registration is rejected.
        """
        directory = cls()

        for course in seed.courses:
            outcome = directory.add_course(
                course.code,
                course.name,
                course.credits,
                course.capacity,
                course.prerequisites,
            )
            if not outcome.ok:
                raise ConfigError(f"Course {course.code}: {outcome.error}")

        for student in seed.students:
            outcome = directory.add_student(
                student.student_id,
                student.name,
                student.major,
                student.max_credits,
                student.completed,
            )
            if not outcome.ok:
                raise ConfigError(f"Student {student.student_id}: {outcome.error}")

        for registration in seed.registrations:
            outcome = directory.register(registration.student_id, registration.course_code)
            if not outcome.ok:
                raise ConfigError(
                    f"Registration {registration.student_id} -> "
                    f"{registration.course_code}: {outcome.error}"
                )

        summary = directory.summary()
        logger.info(
            "Directory seeded with %d courses and %d students",
            summary.total_courses,
            summary.total_students,
        )
        return directory

    # --- Record creation ---

    def add_course(
        self,
        code: str,
        name: str,
        credits: int,
        capacity: int = DEFAULT_CAPACITY,
        prerequisites: Iterable[str] | None = None,
    ) -> Outcome[None]:
        """Add a course to the catalog.

        Returns:
            Successful outcome, or VALIDATION with the reason.
        """
        with self._lock:
            try:
                self._courses.add_course(code, name, credits, capacity, prerequisites)
            except ValidationError as e:
                logger.info("Course %r rejected: %s", code, e)
                return Outcome.failure(ErrorKind.VALIDATION, str(e))
            return Outcome.success()

    def add_student(
        self,
        student_id: str,
        name: str,
        major: str,
        max_credits: int = DEFAULT_CREDIT_LIMIT,
        completed: Iterable[str] | None = None,
    ) -> Outcome[None]:
        """Add a student.

        Returns:
            Successful outcome, or VALIDATION with the reason.
        """
        with self._lock:
            try:
                self._students.add_student(student_id, name, major, max_credits, completed)
            except ValidationError as e:
                logger.info("Student %r rejected: %s", student_id, e)
                return Outcome.failure(ErrorKind.VALIDATION, str(e))
            return Outcome.success()

    # --- Enrollment ---

    def register(self, student_id: str, course_code: str) -> Outcome[int]:
        """Register a student for a course.

        Returns:
            Outcome carrying the student's total credits after registering.
        """
        with self._lock:
            student = self._students.get(student_id)
            if student is None:
                return Outcome.failure(ErrorKind.NOT_FOUND, "Student not found.")
            course = self._courses.get(course_code)
            if course is None:
                return Outcome.failure(ErrorKind.NOT_FOUND, "Course not found.")
            return self._coordinator.register(student, course)

    def drop(self, student_id: str, course_code: str) -> Outcome[None]:
        """Drop a student from a registered course."""
        with self._lock:
            student = self._students.get(student_id)
            if student is None:
                return Outcome.failure(ErrorKind.NOT_FOUND, "Student not found.")
            return self._coordinator.drop(student, course_code)

    # --- Queries ---

    def find_course(self, code: str) -> Course | None:
        """Find a course by code, case-insensitively."""
        with self._lock:
            return self._courses.get(code)

    def find_student(self, student_id: str) -> Student | None:
        """Find a student by id, case-insensitively."""
        with self._lock:
            return self._students.get(student_id)

    def iter_courses(self) -> Iterator[Course]:
        """Iterate over courses ordered by code, from a snapshot."""
        with self._lock:
            courses = self._courses.list_courses()
        return iter(courses)

    def iter_students(self) -> Iterator[Student]:
        """Iterate over students in creation order, from a snapshot."""
        with self._lock:
            students = list(self._students)
        return iter(students)

    def list_courses(self) -> list[CourseListing]:
        """List every course, ordered by code."""
        with self._lock:
            return [course_to_listing(c) for c in self._courses.list_courses()]

    def student_schedule(self, student_id: str) -> Outcome[StudentSchedule]:
        """Get a student's registered courses in registration order."""
        with self._lock:
            student = self._students.get(student_id)
            if student is None:
                return Outcome.failure(ErrorKind.NOT_FOUND, "Student not found.")

            schedule = StudentSchedule(
                student_id=student.student_id,
                name=student.name,
                entries=[
                    ScheduleEntry(code=c.code, name=c.name, credits=c.credits)
                    for c in student.registered_courses
                ],
                total_credits=self._students.total_credits(student),
                max_credits=student.max_credits,
            )
            return Outcome.success(schedule)

    def summary(self) -> Summary:
        """Count students and courses and average the course enrollment."""
        with self._lock:
            courses = self._courses.list_courses()
            if courses:
                avg_enrollment = sum(c.current_enrollment for c in courses) / len(courses)
            else:
                avg_enrollment = 0.0

            return Summary(
                total_students=len(self._students),
                total_courses=len(courses),
                avg_enrollment=avg_enrollment,
            )
