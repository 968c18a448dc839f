"""Unit tests for CourseRegistry."""

import pytest

from registrar.catalog import Course, CourseRegistry
from registrar.exceptions import CapacityError, ValidationError


@pytest.mark.unit
class TestAddCourse:
    """Tests for add_course."""

    def test_add_course_minimal(self, courses: CourseRegistry) -> None:
        """Defaults: capacity 50, no prerequisites, no enrollment."""
        course = courses.add_course("CS101", "Intro to Programming", 3)

        assert course.code == "CS101"
        assert course.name == "Intro to Programming"
        assert course.credits == 3
        assert course.max_capacity == 50
        assert course.prerequisite_codes == frozenset()
        assert course.current_enrollment == 0
        assert len(courses) == 1

    def test_add_course_normalizes_prerequisites(self, courses: CourseRegistry) -> None:
        """Prerequisite codes are stored upper-cased and de-duplicated."""
        course = courses.add_course("CS201", "Data Structures", 4, 40, ["cs101", "CS101", "math100"])

        assert course.prerequisite_codes == frozenset({"CS101", "MATH100"})

    def test_add_course_trims_code(self, courses: CourseRegistry) -> None:
        """Whitespace around the code is dropped."""
        course = courses.add_course("  CS101 ", "Intro", 3)

        assert course.code == "CS101"

    def test_credits_four_accepted_five_rejected(self, courses: CourseRegistry) -> None:
        """Credits upper bound is 4."""
        courses.add_course("CS101", "Intro", 4)

        with pytest.raises(ValidationError) as exc_info:
            courses.add_course("CS102", "Too Heavy", 5)

        assert "Credits must be between 1 and 4" in str(exc_info.value)
        assert "CS102" not in courses

    def test_credits_zero_rejected(self, courses: CourseRegistry) -> None:
        """Credits lower bound is 1."""
        with pytest.raises(ValidationError):
            courses.add_course("CS101", "Intro", 0)

    @pytest.mark.parametrize("capacity", [9, 101])
    def test_capacity_out_of_range_rejected(self, courses: CourseRegistry, capacity: int) -> None:
        """Capacity must be 10-100."""
        with pytest.raises(ValidationError) as exc_info:
            courses.add_course("CS101", "Intro", 3, capacity)

        assert "Capacity must be between 10 and 100" in str(exc_info.value)

    @pytest.mark.parametrize("capacity", [10, 100])
    def test_capacity_bounds_accepted(self, courses: CourseRegistry, capacity: int) -> None:
        """10 and 100 are valid capacities."""
        course = courses.add_course("CS101", "Intro", 3, capacity)

        assert course.max_capacity == capacity

    def test_duplicate_code_rejected_case_insensitive(self, courses: CourseRegistry) -> None:
        """A code differing only in case is a duplicate."""
        courses.add_course("CS101", "Intro", 3)

        with pytest.raises(ValidationError) as exc_info:
            courses.add_course("cs101", "Intro Again", 3)

        assert "already exists" in str(exc_info.value)
        assert len(courses) == 1
        assert courses.get("CS101").name == "Intro"

    def test_self_prerequisite_rejected(self, courses: CourseRegistry) -> None:
        """A course cannot require itself."""
        with pytest.raises(ValidationError) as exc_info:
            courses.add_course("CS101", "Intro", 3, 30, ["math100", "cs101"])

        assert "cannot include the course itself" in str(exc_info.value)
        assert len(courses) == 0

    def test_invalid_code_rejected(self, courses: CourseRegistry) -> None:
        """Code format errors name the field."""
        with pytest.raises(ValidationError) as exc_info:
            courses.add_course("C1", "Too Short", 3)

        assert "Course code" in str(exc_info.value)

    @pytest.mark.parametrize("credits", [2.5, 3.0, True, "3"])
    def test_non_integer_credits_rejected(self, courses: CourseRegistry, credits: object) -> None:
        """Credits must be an int; floats, bools and strings are not truncated or coerced."""
        with pytest.raises(ValidationError) as exc_info:
            courses.add_course("CS101", "Intro", credits)

        assert "Credits must be a whole number" in str(exc_info.value)
        assert len(courses) == 0

    @pytest.mark.parametrize("capacity", [10.5, False])
    def test_non_integer_capacity_rejected(self, courses: CourseRegistry, capacity: object) -> None:
        """Capacity must be an int."""
        with pytest.raises(ValidationError) as exc_info:
            courses.add_course("CS101", "Intro", 3, capacity)

        assert "Capacity must be a whole number" in str(exc_info.value)
        assert "CS101" not in courses

    def test_non_ascii_code_rejected(self, courses: CourseRegistry) -> None:
        """A code that upper-cases into a different string is rejected."""
        with pytest.raises(ValidationError):
            courses.add_course("straß", "German", 3)

        course = courses.add_course("STRASS", "German", 3)

        assert courses.get("strass") is course
        assert len(courses) == 1


@pytest.mark.unit
class TestCourseRecord:
    """Tests for Course field mutability."""

    def test_code_cannot_be_reassigned(self, courses: CourseRegistry) -> None:
        """The code is fixed once the course exists."""
        course = courses.add_course("CS101", "Intro", 3)

        with pytest.raises(AttributeError):
            course.code = "CS999"

        assert course.code == "CS101"
        assert courses.get("CS101") is course
        assert courses.get("CS999") is None

    def test_enrollment_stays_assignable(self) -> None:
        """Counters and display fields remain mutable."""
        course = Course(code="CS101", name="Intro", credits=3, max_capacity=30)

        course.current_enrollment = 5
        course.name = "Intro to Programming"

        assert course.current_enrollment == 5
        assert course.name == "Intro to Programming"


@pytest.mark.unit
class TestLookup:
    """Tests for get, contains and list_courses."""

    def test_get_case_insensitive(self, courses: CourseRegistry) -> None:
        """Lookup ignores case."""
        created = courses.add_course("Math100", "Basic Mathematics", 3)

        assert courses.get("MATH100") is created
        assert courses.get("math100") is created
        assert "mAtH100" in courses

    def test_get_missing_returns_none(self, courses: CourseRegistry) -> None:
        """Unknown codes return None."""
        assert courses.get("NOPE100") is None

    def test_list_courses_empty(self, courses: CourseRegistry) -> None:
        """No courses gives an empty list."""
        assert courses.list_courses() == []

    def test_list_courses_ordered_case_insensitive(self, courses: CourseRegistry) -> None:
        """Courses come back ordered by code regardless of case."""
        courses.add_course("math100", "Math", 3)
        courses.add_course("CS201", "DS", 3)
        courses.add_course("bio110", "Biology", 3)

        codes = [c.code for c in courses.list_courses()]

        assert codes == ["bio110", "CS201", "math100"]

    def test_list_courses_restartable(self, courses: CourseRegistry) -> None:
        """Listing twice gives the same sequence."""
        courses.add_course("CS101", "Intro", 3)
        courses.add_course("CS102", "Intro II", 3)

        assert [c.code for c in courses] == [c.code for c in courses]


@pytest.mark.unit
class TestCapacity:
    """Tests for is_full and the enrollment counters."""

    def test_is_full(self, courses: CourseRegistry) -> None:
        """Full once enrollment reaches capacity."""
        course = Course(code="CS101", name="Intro", credits=3, max_capacity=2)

        assert courses.is_full(course) is False
        course.current_enrollment = 2
        assert courses.is_full(course) is True

    def test_increment(self, courses: CourseRegistry) -> None:
        """Increment adds one seat."""
        course = Course(code="CS101", name="Intro", credits=3, max_capacity=2)

        courses.increment_enrollment(course)

        assert course.current_enrollment == 1

    def test_increment_full_raises(self, courses: CourseRegistry) -> None:
        """Increment on a full course raises and leaves the count alone."""
        course = Course(code="CS101", name="Intro", credits=3, max_capacity=1, current_enrollment=1)

        with pytest.raises(CapacityError):
            courses.increment_enrollment(course)

        assert course.current_enrollment == 1

    def test_decrement_floors_at_zero(self, courses: CourseRegistry) -> None:
        """Decrement on an empty course is a no-op."""
        course = Course(code="CS101", name="Intro", credits=3, max_capacity=10)

        courses.decrement_enrollment(course)

        assert course.current_enrollment == 0


@pytest.mark.unit
class TestHasPrerequisites:
    """Tests for has_prerequisites."""

    def test_no_prerequisites_always_true(self, courses: CourseRegistry) -> None:
        """Vacuously satisfied with no prerequisites."""
        course = courses.add_course("CS101", "Intro", 3)

        assert courses.has_prerequisites(course, []) is True

    def test_all_required(self, courses: CourseRegistry) -> None:
        """Every prerequisite must be completed."""
        course = courses.add_course("CS201", "DS", 3, 30, ["CS101", "MATH100"])

        assert courses.has_prerequisites(course, ["CS101"]) is False
        assert courses.has_prerequisites(course, ["CS101", "MATH100", "BIO110"]) is True

    def test_case_insensitive(self, courses: CourseRegistry) -> None:
        """Completed codes match regardless of case."""
        course = courses.add_course("CS101", "Intro", 3, 30, ["MATH100"])

        assert courses.has_prerequisites(course, ["math100"]) is True
