from .query_dtos import QueryCodebaseArgs, QUERY_CODEBASE_INPUT_SCHEMA

__all__ = [
    "QueryCodebaseArgs",
    "QUERY_CODEBASE_INPUT_SCHEMA",
]
