"""Domain exceptions."""


class RoleGateError(Exception):
    """Base exception for RoleGate."""

    pass


class PermissionDenied(RoleGateError):
    """Service account does not hold the rights required for the operation."""

    pass


class NotFound(RoleGateError):
    """Requested resource was not found."""

    pass


class ValidationError(RoleGateError):
    """Validation failed for input data."""

    pass
