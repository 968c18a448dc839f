"""Field validation for course and student records.

Codes and ids compare case-insensitively. Every lookup goes through
normalize_key so the uniqueness rule is enforced in one place.
"""

from __future__ import annotations

from collections.abc import Iterable

from registrar.exceptions import ValidationError

MIN_IDENTITY_LENGTH = 3
MAX_IDENTITY_LENGTH = 10


def normalize_key(value: str) -> str:
    """Return the canonical map key for a code or id."""
    return value.strip().upper()


def normalize_keys(values: Iterable[str] | None) -> frozenset[str]:
    """Normalize a collection of codes, dropping blanks."""
    if not values:
        return frozenset()
    return frozenset(normalize_key(v) for v in values if v and v.strip())


def validate_identity(value: str | None, field_name: str) -> str:
    """Validate a course code or student id.

    Args:
        value: Raw value as entered by the caller.
        field_name: Label used in error messages (e.g., "Course code").

    Returns:
        The trimmed value.

    Raises:
        ValidationError: If the value is empty, too short or long, or
            contains anything other than ASCII letters and digits.
    """
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} cannot be empty.")

    value = value.strip()
    if (
        len(value) < MIN_IDENTITY_LENGTH
        or len(value) > MAX_IDENTITY_LENGTH
        or not value.isascii()
        or not value.isalnum()
    ):
        raise ValidationError(
            f"{field_name} must be {MIN_IDENTITY_LENGTH}-{MAX_IDENTITY_LENGTH} "
            "alphanumeric characters."
        )
    return value


def require_int(value: object, field_name: str) -> int:
    """Check that a numeric field holds a whole number.

    Raises:
        ValidationError: If the value is not an int, or is a bool.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be a whole number.")
    return value
