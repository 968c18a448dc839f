"""Pydantic models returned by the directory command surface."""

from pydantic import BaseModel, Field

from registrar.catalog import Course


class CourseListing(BaseModel):
    """One row of the course list."""

    code: str
    name: str
    credits: int
    enrollment: int
    capacity: int
    prerequisites: list[str] = Field(default_factory=list)


def course_to_listing(course: Course) -> CourseListing:
    """Convert a Course record to a CourseListing."""
    return CourseListing(
        code=course.code,
        name=course.name,
        credits=course.credits,
        enrollment=course.current_enrollment,
        capacity=course.max_capacity,
        prerequisites=sorted(course.prerequisite_codes),
    )


class ScheduleEntry(BaseModel):
    """A registered course on a student's schedule."""

    code: str
    name: str
    credits: int


class StudentSchedule(BaseModel):
    """A student's current schedule."""

    student_id: str
    name: str
    entries: list[ScheduleEntry] = Field(default_factory=list)
    total_credits: int = 0
    max_credits: int


class Summary(BaseModel):
    """Aggregate directory statistics."""

    total_students: int
    total_courses: int
    avg_enrollment: float
