from dataclasses import dataclass, field
from typing import Union

from ..value_objects.error_kind import ErrorKind


@dataclass(frozen=True)
class Usage:
    duration_ms: int = 0


@dataclass(frozen=True)
class QueryResult:
    """Answer produced by a successful CLI run."""

    answer: str
    usage: Usage = field(default_factory=Usage)


@dataclass(frozen=True)
class Success:
    result: QueryResult

    is_error = False

    @property
    def text(self) -> str:
        return self.result.answer


@dataclass(frozen=True)
class Failure:
    """A classified failure; carries the caller-visible message."""

    kind: ErrorKind
    message: str

    is_error = True

    @property
    def text(self) -> str:
        return f"Error: {self.message}"


ExecutionOutcome = Union[Success, Failure]
