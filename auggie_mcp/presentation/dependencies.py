"""
Dependency wiring.

Builds the concrete executor, use case and server from a resolved
ServerConfig following Clean Architecture principles.
"""

from auggie_mcp.application.interfaces.i_query_executor import IQueryExecutor
from auggie_mcp.application.use_cases.query_codebase import QueryCodebaseUseCase
from auggie_mcp.infrastructure.cli.auggie_executor import AuggieQueryExecutor
from auggie_mcp.infrastructure.config.server_config import ServerConfig
from auggie_mcp.infrastructure.mcp.servers.auggie_server import AuggieMCPServer


def get_query_executor(config: ServerConfig) -> IQueryExecutor:
    return AuggieQueryExecutor(config)


def get_query_use_case(config: ServerConfig) -> QueryCodebaseUseCase:
    return QueryCodebaseUseCase(executor=get_query_executor(config))


def get_mcp_server(config: ServerConfig) -> AuggieMCPServer:
    return AuggieMCPServer(get_query_use_case(config))
