from abc import ABC, abstractmethod

from auggie_mcp.domain.entities.execution_outcome import ExecutionOutcome
from auggie_mcp.domain.value_objects.query_request import QueryRequest


class IQueryExecutor(ABC):
    """Interface for running one query against the external CLI."""

    @abstractmethod
    async def execute(self, request: QueryRequest) -> ExecutionOutcome:
        """Run the query and return its outcome. Must not raise."""
        pass
