from .domain_exceptions import (
    DomainError,
    PreflightUnavailableError,
    InvalidArgumentsError,
)

__all__ = [
    "DomainError",
    "PreflightUnavailableError",
    "InvalidArgumentsError",
]
