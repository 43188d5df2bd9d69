import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from auggie_mcp.domain.entities.execution_outcome import ExecutionOutcome, Failure
from auggie_mcp.domain.exceptions.domain_exceptions import InvalidArgumentsError
from auggie_mcp.domain.value_objects.error_kind import ErrorKind
from auggie_mcp.domain.value_objects.query_request import QUERY_REQUIRED_MESSAGE
from auggie_mcp.application.dtos.query_dtos import QueryCodebaseArgs
from auggie_mcp.application.interfaces.i_query_executor import IQueryExecutor

logger = logging.getLogger(__name__)


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    field_name = str(first["loc"][0]) if first["loc"] else "arguments"
    if field_name == "query":
        return QUERY_REQUIRED_MESSAGE
    return f"Invalid '{field_name}' argument: {first['msg']}"


@dataclass
class QueryCodebaseUseCase:
    """Use case for answering one query_codebase tool call."""

    executor: IQueryExecutor

    async def execute(self, arguments: Any) -> ExecutionOutcome:
        """Validate raw tool arguments and run the query.

        1. Reject anything that is not a mapping with a non-empty query
        2. Build the QueryRequest
        3. Hand it to the executor exactly once

        Returns:
            Success or Failure; invalid arguments never reach the executor
        """
        if not arguments or not isinstance(arguments, dict):
            return Failure(ErrorKind.INVALID_ARGUMENTS, "Invalid arguments")

        try:
            request = QueryCodebaseArgs.model_validate(arguments).to_request()
        except ValidationError as e:
            return Failure(ErrorKind.INVALID_ARGUMENTS, _describe_validation_error(e))
        except InvalidArgumentsError as e:
            return Failure(e.kind, str(e))

        logger.info(
            f"Running query_codebase in {request.working_directory}: {request.query!r}"
        )
        outcome = await self.executor.execute(request)

        if isinstance(outcome, Failure):
            logger.warning(f"query_codebase failed ({outcome.kind.value})")
        else:
            logger.info(
                f"query_codebase answered in {outcome.result.usage.duration_ms} ms"
            )
        return outcome
