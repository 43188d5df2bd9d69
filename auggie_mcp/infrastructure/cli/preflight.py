import asyncio
import logging
import sys

from auggie_mcp.domain.exceptions.domain_exceptions import PreflightUnavailableError

logger = logging.getLogger(__name__)

INSTALL_DOCS_URL = "https://docs.augmentcode.com/cli/overview"
DEFAULT_PREFLIGHT_TIMEOUT_SEC = 30


async def check_cli_available(
    command: str = "auggie", timeout: float = DEFAULT_PREFLIGHT_TIMEOUT_SEC
) -> str:
    """Make sure the Auggie CLI can be started and reports a version.

    Args:
        command: Name or path of the CLI binary
        timeout: Seconds to wait for `--version` to answer

    Returns:
        The version string printed by the CLI

    Raises:
        PreflightUnavailableError: If the CLI is missing, fails, or prints nothing
    """
    try:
        version = await _read_version(command, timeout)
    except (OSError, asyncio.TimeoutError, RuntimeError) as e:
        raise PreflightUnavailableError(
            f"Auggie CLI not found. Please install it first: {INSTALL_DOCS_URL}\n"
            f"Error: {e}"
        ) from e

    logger.info(f"Found Auggie CLI {version}")
    return version


async def _read_version(command: str, timeout: float) -> str:
    argv = [command, "--version"]
    if sys.platform == "win32":
        argv = ["cmd", "/c", *argv]

    process = await asyncio.create_subprocess_exec(
        *argv,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        raise asyncio.TimeoutError(f"'{command} --version' timed out after {timeout}s")

    if process.returncode != 0:
        raise RuntimeError(
            f"'{command} --version' exited with code {process.returncode}: "
            f"{stderr.decode('utf-8', errors='replace').strip() or '<empty>'}"
        )

    version = stdout.decode("utf-8", errors="replace").strip()
    if not version:
        raise RuntimeError("Auggie CLI returned empty version")
    return version
