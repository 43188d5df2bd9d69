"""
MCP Server Entry Point.

Resolves configuration, checks that the Auggie CLI is installed and serves
the query_codebase tool over stdio.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from auggie_mcp.domain.exceptions.domain_exceptions import PreflightUnavailableError
from auggie_mcp.infrastructure.cli.preflight import check_cli_available
from auggie_mcp.infrastructure.config.server_config import (
    ServerConfig,
    resolve_server_config,
)
from auggie_mcp.infrastructure.config.settings import Settings, get_settings
from auggie_mcp.infrastructure.logging.logging_config import setup_logging
from auggie_mcp.infrastructure.mcp.servers.auggie_server import SERVER_NAME
from auggie_mcp.presentation.dependencies import get_mcp_server

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="MCP server exposing Augment's context engine via the Auggie CLI",
    )
    parser.add_argument("--model", help="Model ID passed to the Auggie CLI")
    parser.add_argument("--rules-path", help="Path to an additional rules file")
    parser.add_argument("--timeout-sec", help="Query timeout in seconds (default: 240)")
    parser.add_argument(
        "--output-format", help="Output format requested from the CLI: text or json"
    )
    parser.add_argument("--command", help="Name or path of the Auggie CLI binary")
    parser.add_argument("--log-level", help="Log level (default: INFO)")
    parser.add_argument(
        "--skip-preflight",
        action="store_true",
        help="Start without checking 'auggie --version'",
    )
    return parser


def resolve_config(args: argparse.Namespace, settings: Settings) -> ServerConfig:
    return resolve_server_config(
        settings,
        model=args.model,
        rules_path=args.rules_path,
        timeout_sec=args.timeout_sec,
        output_format=args.output_format,
        command=args.command,
    )


async def serve(config: ServerConfig, settings: Settings, skip_preflight: bool = False) -> None:
    """Run the preflight check, then serve until stdin closes."""
    if not skip_preflight:
        logger.info("Checking Auggie CLI availability...")
        await check_cli_available(config.command)

    # The CLI reads the token itself; only report whether it is there
    if settings.session_auth is not None:
        logger.info("Using AUGMENT_SESSION_AUTH from environment")
    else:
        logger.info("No AUGMENT_SESSION_AUTH set - relying on Auggie CLI login")

    logger.info(
        f"Model: {config.model}, timeout: {config.timeout_sec}s, "
        f"output format: {config.output_format.value}"
    )
    await get_mcp_server(config).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, settings.json_logs)

    config = resolve_config(args, settings)

    try:
        asyncio.run(serve(config, settings, skip_preflight=args.skip_preflight))
    except PreflightUnavailableError as e:
        logger.error(f"Failed to start server: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info(f"Shutting down {SERVER_NAME}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
