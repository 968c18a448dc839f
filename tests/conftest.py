"""Shared pytest fixtures and configuration."""

import pytest

from registrar.catalog import CourseRegistry
from registrar.directory import Directory
from registrar.enrollment import EnrollmentCoordinator
from registrar.students import StudentRegistry


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def courses() -> CourseRegistry:
    """Create an empty CourseRegistry."""
    return CourseRegistry()


@pytest.fixture
def students() -> StudentRegistry:
    """Create an empty StudentRegistry."""
    return StudentRegistry()


@pytest.fixture
def coordinator(courses: CourseRegistry, students: StudentRegistry) -> EnrollmentCoordinator:
    """Create a coordinator over the shared registries."""
    return EnrollmentCoordinator(courses, students)


@pytest.fixture
def directory() -> Directory:
    """Create an empty Directory."""
    return Directory()
