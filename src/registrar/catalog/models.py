"""Data models for the course catalog."""

from __future__ import annotations

from dataclasses import dataclass, field

from registrar.identity import normalize_key


@dataclass
class Course:
    """A course offering students can register for.

    Attributes:
        code: Course code as entered (e.g., "CS101"). Compared case-insensitively.
        name: Display name.
        credits: Credit value counted against a student's limit.
        max_capacity: Maximum number of registered students.
        prerequisite_codes: Normalized codes that must be completed first.
        current_enrollment: Number of students currently registered.
    """

    code: str
    name: str
    credits: int
    max_capacity: int
    prerequisite_codes: frozenset[str] = field(default_factory=frozenset)
    current_enrollment: int = 0

    def __setattr__(self, name: str, value: object) -> None:
        # Registry keys are derived from the code
        if name == "code" and "code" in self.__dict__:
            raise AttributeError("Course code cannot be changed.")
        super().__setattr__(name, value)

    @property
    def key(self) -> str:
        """Normalized lookup key for this course."""
        return normalize_key(self.code)

    def __repr__(self) -> str:
        return (
            f"<Course(code={self.code!r}, enrollment="
            f"{self.current_enrollment}/{self.max_capacity})>"
        )
