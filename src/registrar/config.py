"""Seed configuration for populating a directory from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from registrar.catalog.registry import DEFAULT_CAPACITY
from registrar.students.registry import DEFAULT_CREDIT_LIMIT


class ConfigError(Exception):
    """Raised when a seed file is missing or malformed."""


def _require(entry: dict[str, Any], fields: list[str], section: str, index: int) -> None:
    missing = [f for f in fields if entry.get(f) is None or not str(entry[f]).strip()]
    if missing:
        raise ConfigError(
            f"{section}[{index}] is missing required fields: {', '.join(missing)}"
        )


def _as_list(value: Any, label: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if not isinstance(value, list):
        raise ConfigError(f"{label} must be a list, got {type(value).__name__}")
    return [str(v) for v in value if v is not None]


def _as_int(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{label} must be a whole number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise ConfigError(f"{label} must be a whole number, got {value!r}")


@dataclass
class CourseSeed:
    """A course to create."""

    code: str
    name: str
    credits: int
    capacity: int = DEFAULT_CAPACITY
    prerequisites: list[str] = field(default_factory=list)


@dataclass
class StudentSeed:
    """A student to create."""

    student_id: str
    name: str
    major: str
    max_credits: int = DEFAULT_CREDIT_LIMIT
    completed: list[str] = field(default_factory=list)


@dataclass
class RegistrationSeed:
    """A registration to apply after all records exist."""

    student_id: str
    course_code: str


@dataclass
class SeedConfig:
    """Initial directory contents.

    Courses are created first, then students, then registrations are
    applied in file order.
    """

    courses: list[CourseSeed] = field(default_factory=list)
    students: list[StudentSeed] = field(default_factory=list)
    registrations: list[RegistrationSeed] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SeedConfig:
        """Create a seed from a parsed YAML mapping.

        Args:
            data: Mapping with optional 'courses', 'students' and
                  'registrations' lists.

        Returns:
            Parsed seed.

        Raises:
            ConfigError: If a section is not a list or an entry lacks
                required fields.
        """
        courses = []
        for i, entry in enumerate(cls._section(data, "courses")):
            _require(entry, ["code", "name", "credits"], "courses", i)
            courses.append(
                CourseSeed(
                    code=str(entry["code"]),
                    name=str(entry["name"]),
                    credits=_as_int(entry["credits"], f"courses[{i}].credits"),
                    capacity=_as_int(
                        entry.get("capacity", DEFAULT_CAPACITY), f"courses[{i}].capacity"
                    ),
                    prerequisites=_as_list(
                        entry.get("prerequisites"), f"courses[{i}].prerequisites"
                    ),
                )
            )

        students = []
        for i, entry in enumerate(cls._section(data, "students")):
            _require(entry, ["id", "name", "major"], "students", i)
            students.append(
                StudentSeed(
                    student_id=str(entry["id"]),
                    name=str(entry["name"]),
                    major=str(entry["major"]),
                    max_credits=_as_int(
                        entry.get("max_credits", DEFAULT_CREDIT_LIMIT),
                        f"students[{i}].max_credits",
                    ),
                    completed=_as_list(entry.get("completed"), f"students[{i}].completed"),
                )
            )

        registrations = []
        for i, entry in enumerate(cls._section(data, "registrations")):
            _require(entry, ["student", "course"], "registrations", i)
            registrations.append(
                RegistrationSeed(
                    student_id=str(entry["student"]),
                    course_code=str(entry["course"]),
                )
            )

        return cls(courses=courses, students=students, registrations=registrations)

    @staticmethod
    def _section(data: dict[str, Any], name: str) -> list[dict[str, Any]]:
        section = data.get(name) or []
        if not isinstance(section, list):
            raise ConfigError(f"'{name}' must be a list, got {type(section).__name__}")
        for i, entry in enumerate(section):
            if not isinstance(entry, dict):
                raise ConfigError(f"{name}[{i}] must be a mapping")
        return section


# Demo data the console program starts with when no seed file is given
DEFAULT_SEED = SeedConfig(
    courses=[
        CourseSeed(code="MATH100", name="Basic Mathematics", credits=3, capacity=30),
        CourseSeed(
            code="CS101",
            name="Introduction to Programming",
            credits=3,
            capacity=30,
            prerequisites=["MATH100"],
        ),
    ],
    students=[
        StudentSeed(
            student_id="S001",
            name="Alice Johnson",
            major="Computer Science",
            max_credits=18,
            completed=["MATH100"],
        ),
    ],
)


def load_seed(seed_path: Path | str) -> SeedConfig:
    """Load a seed from a YAML file.

    Args:
        seed_path: Path to the seed file.

    Returns:
        Parsed seed.

    Raises:
        ConfigError: If the file doesn't exist or is invalid.
    """
    seed_path = Path(seed_path)

    if not seed_path.exists():
        raise ConfigError(f"Seed file not found: {seed_path}")

    try:
        with open(seed_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {seed_path}: {e}") from e

    if data is None:
        return SeedConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Seed must be a YAML mapping, got {type(data).__name__}")

    try:
        return SeedConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in {seed_path}: {e}") from e
