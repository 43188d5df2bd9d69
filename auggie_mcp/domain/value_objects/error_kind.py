from enum import Enum


class ErrorKind(Enum):
    """Classification of every way a query can fail."""

    PREFLIGHT_UNAVAILABLE = "preflight_unavailable"
    INVALID_ARGUMENTS = "invalid_arguments"
    TIMEOUT = "timeout"
    AUTHENTICATION_REQUIRED = "authentication_required"
    EXTERNAL_TOOL_FAILURE = "external_tool_failure"
    SPAWN_FAILURE = "spawn_failure"
