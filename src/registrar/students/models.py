"""Data models for student records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from registrar.identity import normalize_key

if TYPE_CHECKING:
    from registrar.catalog import Course


@dataclass
class Student:
    """An enrollee with a completed history and a current registration list.

    Attributes:
        student_id: Student id as entered. Compared case-insensitively.
        name: Display name.
        major: Declared major.
        max_credits: Most credits the student may carry at once.
        completed_courses: Normalized codes of completed courses.
        registered_courses: Courses currently registered, in registration order.
    """

    student_id: str
    name: str
    major: str
    max_credits: int = 18
    completed_courses: frozenset[str] = field(default_factory=frozenset)
    registered_courses: list[Course] = field(default_factory=list)

    def __setattr__(self, name: str, value: object) -> None:
        # Registry keys are derived from the id
        if name == "student_id" and "student_id" in self.__dict__:
            raise AttributeError("Student ID cannot be changed.")
        super().__setattr__(name, value)

    @property
    def key(self) -> str:
        """Normalized lookup key for this student."""
        return normalize_key(self.student_id)

    def __repr__(self) -> str:
        return f"<Student(student_id={self.student_id!r}, name={self.name!r})>"
