from ..value_objects.error_kind import ErrorKind


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    kind: ErrorKind | None = None


class PreflightUnavailableError(DomainError):
    """Raised at startup when the Auggie CLI is missing or reports no version."""

    kind = ErrorKind.PREFLIGHT_UNAVAILABLE


class InvalidArgumentsError(DomainError):
    """Raised when tool arguments are missing or malformed."""

    kind = ErrorKind.INVALID_ARGUMENTS
