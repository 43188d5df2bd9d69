from .query_codebase import QueryCodebaseUseCase

__all__ = [
    "QueryCodebaseUseCase",
]
