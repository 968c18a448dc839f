"""EnrollmentCoordinator - Applies registration rules across students and courses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from registrar.enrollment.models import ErrorKind, Outcome
from registrar.identity import normalize_key

if TYPE_CHECKING:
    from registrar.catalog import Course, CourseRegistry
    from registrar.students import Student, StudentRegistry

logger = logging.getLogger(__name__)


class EnrollmentCoordinator:
    """Validates and applies register and drop operations.

    This is the only place that changes a course's enrollment count or a
    student's registration list. Each successful operation updates both
    records together, so a student never holds a course the course does not
    count, and the other way around.
    """

    def __init__(self, courses: CourseRegistry, students: StudentRegistry) -> None:
        """Initialize the coordinator.

        Args:
            courses: Registry owning course capacity state.
            students: Registry owning student credit state.
        """
        self.courses = courses
        self.students = students

    def check_registration(self, student: Student, course: Course) -> Outcome[None]:
        """Run the registration rules without changing anything.

        Rules are checked in a fixed order so the reported reason is stable:
        already registered, credit limit, prerequisites, then capacity.
        """
        if self.students.is_registered_for(student, course.code):
            return Outcome.failure(
                ErrorKind.ALREADY_REGISTERED,
                "Student is already registered for this course.",
            )

        current = self.students.total_credits(student)
        if current + course.credits > student.max_credits:
            return Outcome.failure(
                ErrorKind.CREDIT_LIMIT,
                f"Credit limit exceeded. Current: {current}/{student.max_credits}, "
                f"course adds: {course.credits}.",
            )

        if not self.courses.has_prerequisites(course, student.completed_courses):
            return Outcome.failure(ErrorKind.PREREQUISITES_NOT_MET, "Prerequisites not met.")

        # Capacity is the last gate
        if self.courses.is_full(course):
            return Outcome.failure(ErrorKind.COURSE_FULL, "Course is full.")

        return Outcome.success()

    def register(self, student: Student, course: Course) -> Outcome[int]:
        """Register a student for a course.

        Args:
            student: The student registering.
            course: The course to register for.

        Returns:
            Outcome carrying the student's new total credits, or the first
            rule that failed.
        """
        check = self.check_registration(student, course)
        if not check.ok:
            logger.info(
                "Registration of %s in %s rejected: %s",
                student.student_id,
                course.code,
                check.error,
            )
            return Outcome.failure(check.kind, check.error)

        # Seat first: it is the only step that can raise, and nothing has
        # changed yet if it does.
        self.courses.increment_enrollment(course)
        student.registered_courses.append(course)

        total = self.students.total_credits(student)
        logger.info(
            "Registered %s in %s (%d/%d credits, enrollment %d/%d)",
            student.student_id,
            course.code,
            total,
            student.max_credits,
            course.current_enrollment,
            course.max_capacity,
        )
        return Outcome.success(total)

    def drop(self, student: Student, course_code: str) -> Outcome[None]:
        """Drop a student from a registered course.

        Args:
            student: The student dropping the course.
            course_code: Code of the course, compared case-insensitively.

        Returns:
            Successful outcome, or NOT_REGISTERED if the student does not
            hold the course.
        """
        key = normalize_key(course_code)
        course = next((c for c in student.registered_courses if c.key == key), None)
        if course is None:
            logger.info(
                "Drop of %s from %s rejected: not registered",
                student.student_id,
                course_code,
            )
            return Outcome.failure(
                ErrorKind.NOT_REGISTERED,
                "Student is not registered in this course.",
            )

        student.registered_courses.remove(course)
        self.courses.decrement_enrollment(course)
        logger.info(
            "Dropped %s from %s (enrollment %d/%d)",
            student.student_id,
            course.code,
            course.current_enrollment,
            course.max_capacity,
        )
        return Outcome.success()
