"""
MCP Server exposing the Auggie CLI as a single tool.

The server advertises `query_codebase`, which hands the query to Augment's
context engine through the Auggie CLI and returns whatever the CLI prints.

Usage:
    Run as standalone server:
        auggie-mcp

    Or build it around your own executor:
        server = AuggieMCPServer(QueryCodebaseUseCase(executor))
        await server.run()
"""

import logging
from typing import Any

from mcp.server import Server, NotificationOptions
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from auggie_mcp.application.dtos.query_dtos import QUERY_CODEBASE_INPUT_SCHEMA
from auggie_mcp.application.use_cases.query_codebase import QueryCodebaseUseCase

logger = logging.getLogger(__name__)

SERVER_NAME = "auggie-mcp"
SERVER_VERSION = "0.1.0"
QUERY_CODEBASE_TOOL = "query_codebase"


class UnknownToolError(ValueError):
    """Raised when a client calls a tool this server does not provide."""


class AuggieMCPServer:
    """MCP Server wrapping the Auggie CLI."""

    def __init__(self, use_case: QueryCodebaseUseCase):
        self.use_case = use_case

        self.server = Server(SERVER_NAME, version=SERVER_VERSION)
        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register MCP tool handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return await self.list_tools()

        # Arguments are validated by the use case so every rejection reads the same
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
            return await self.call_tool(name, arguments)

    async def list_tools(self) -> list[Tool]:
        return [
            Tool(
                name=QUERY_CODEBASE_TOOL,
                description=(
                    "Query a codebase using Augment's context engine via Auggie CLI. "
                    "This tool provides intelligent answers about code structure, "
                    "functionality, and implementation details by leveraging "
                    "Augment's advanced context retrieval."
                ),
                inputSchema=QUERY_CODEBASE_INPUT_SCHEMA,
            )
        ]

    async def call_tool(self, name: str, arguments: Any) -> CallToolResult:
        """Dispatch a tool call.

        Raises:
            UnknownToolError: If the tool name is not query_codebase
        """
        if name != QUERY_CODEBASE_TOOL:
            raise UnknownToolError(f"Unknown tool: {name}")

        outcome = await self.use_case.execute(arguments)
        return CallToolResult(
            content=[TextContent(type="text", text=outcome.text)],
            isError=outcome.is_error,
        )

    async def run(self) -> None:
        """Run the MCP server using stdio transport."""
        logger.info(f"Starting {SERVER_NAME} {SERVER_VERSION} on stdio")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            )
