from .i_query_executor import IQueryExecutor

__all__ = [
    "IQueryExecutor",
]
