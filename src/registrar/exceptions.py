"""Custom exceptions for the registration core."""


class RegistrarError(Exception):
    """Base exception for registration errors."""


class ValidationError(RegistrarError):
    """A record was rejected before it was created."""


class CapacityError(RegistrarError):
    """Enrollment was incremented on a course that is already full."""
