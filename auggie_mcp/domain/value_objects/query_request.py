import os
from dataclasses import dataclass
from typing import Optional

from ..exceptions.domain_exceptions import InvalidArgumentsError

QUERY_REQUIRED_MESSAGE = "'query' argument is required and must be a non-empty string"


@dataclass(frozen=True)
class QueryRequest:
    """Immutable value object describing one codebase query."""

    query: str
    workspace_root: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.query, str) or not self.query.strip():
            raise InvalidArgumentsError(QUERY_REQUIRED_MESSAGE)
        # NUL cannot be passed through argv
        if "\x00" in self.query:
            raise InvalidArgumentsError("'query' must not contain NUL characters")

        if self.workspace_root is not None:
            if not isinstance(self.workspace_root, str):
                raise InvalidArgumentsError("'workspace_root' must be a string")
            if "\x00" in self.workspace_root:
                raise InvalidArgumentsError(
                    "'workspace_root' must not contain NUL characters"
                )
            if not os.path.isabs(self.workspace_root):
                raise InvalidArgumentsError(
                    f"'workspace_root' must be an absolute path: {self.workspace_root}"
                )

    @property
    def working_directory(self) -> str:
        """Directory the CLI runs in; falls back to the server's own cwd."""
        return self.workspace_root or os.getcwd()
