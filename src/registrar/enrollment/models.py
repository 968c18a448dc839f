"""Result types shared by the enrollment coordinator and the directory."""

from __future__ import annotations

from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorKind(StrEnum):
    """Why an operation did not go through."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    ALREADY_REGISTERED = "already_registered"
    CREDIT_LIMIT = "credit_limit"
    PREREQUISITES_NOT_MET = "prerequisites_not_met"
    COURSE_FULL = "course_full"
    NOT_REGISTERED = "not_registered"


class Outcome(BaseModel, Generic[T]):
    """Result of a command: a value on success, or a tagged failure.

    Failures are ordinary results. Callers branch on ``ok`` (or ``kind``)
    rather than catching exceptions.
    """

    data: T | None = None
    error: str | None = None
    kind: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        """Whether the command succeeded."""
        return self.kind is None

    @classmethod
    def success(cls, data: T | None = None) -> Outcome[T]:
        """Build a successful outcome."""
        return cls(data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> Outcome[T]:
        """Build a failed outcome carrying a human-readable reason."""
        return cls(error=message, kind=kind)
