import asyncio
import codecs
import logging
import os
import sys
import time
from typing import List, Optional, Tuple

from auggie_mcp.domain.entities.execution_outcome import (
    ExecutionOutcome,
    Failure,
    QueryResult,
    Success,
    Usage,
)
from auggie_mcp.domain.services.failure_classifier import classify_exit
from auggie_mcp.domain.value_objects.error_kind import ErrorKind
from auggie_mcp.domain.value_objects.output_format import OutputFormat
from auggie_mcp.domain.value_objects.query_request import QueryRequest
from auggie_mcp.application.interfaces.i_query_executor import IQueryExecutor
from auggie_mcp.infrastructure.config.server_config import ServerConfig

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


def build_instruction(query: str, platform: str = sys.platform) -> str:
    """Instruction passed as the CLI's final argument."""
    instruction = (
        f'call codebase-retrieval with "{query}". '
        "Return the relevant output and nothing more; everything you write will be "
        "piped to a different CLI tool, so don't write anything other than the output"
    )
    if platform == "win32":
        # cmd /c re-parses the command line: without inner double quotes the
        # whole argument stays one quoted run and & | < > are literal.
        # %VAR% is still expanded.
        instruction = instruction.replace('"', "'")
    return instruction


def build_command(
    request: QueryRequest, config: ServerConfig, platform: str = sys.platform
) -> List[str]:
    """Build the full argv for one query."""
    if platform == "win32":
        # npm shims are .cmd files which CreateProcess cannot start directly
        cmd = ["cmd", "/c", config.command]
    else:
        cmd = [config.command]

    cmd.extend(["--print", "--quiet"])

    if request.workspace_root:
        cmd.extend(["--workspace-root", request.workspace_root])

    cmd.extend(["--model", config.model])

    if config.rules_path:
        cmd.extend(["--rules", config.rules_path])

    if config.output_format == OutputFormat.JSON:
        cmd.extend(["--output-format", "json"])

    cmd.append(build_instruction(request.query, platform))
    return cmd


class AuggieQueryExecutor(IQueryExecutor):
    """Runs one Auggie CLI process per query and classifies how it ended.

    The timeout timer and the exit watcher race to settle a single future;
    whichever comes second finds it done and does nothing.
    """

    def __init__(self, config: ServerConfig):
        self.config = config
        self._watchers: set[asyncio.Task] = set()

    async def execute(self, request: QueryRequest) -> ExecutionOutcome:
        cmd = build_command(request, self.config)
        cwd = request.working_directory
        started = time.monotonic()

        logger.debug(f"Spawning {cmd[0]} in {cwd}")
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=os.environ.copy(),
                cwd=cwd,
            )
        except (OSError, ValueError) as e:
            logger.error(f"Failed to spawn Auggie CLI: {e}")
            return Failure(ErrorKind.SPAWN_FAILURE, f"Failed to spawn Auggie CLI: {e}")

        loop = asyncio.get_running_loop()
        settled: asyncio.Future = loop.create_future()
        timeout_sec = self.config.timeout_sec

        def on_timeout() -> None:
            if settled.done():
                return
            logger.warning(
                f"Auggie CLI (pid {process.pid}) timed out after {timeout_sec}s"
            )
            settled.set_result(
                Failure(ErrorKind.TIMEOUT, f"Query timed out after {timeout_sec} seconds")
            )
            self._terminate(process)

        timer = loop.call_later(timeout_sec, on_timeout)

        def on_exit(watcher: asyncio.Task) -> None:
            timer.cancel()
            error = None if watcher.cancelled() else watcher.exception()
            if settled.done():
                return
            if watcher.cancelled():
                settled.cancel()
                return
            if error is not None:
                logger.error(f"Lost track of Auggie CLI (pid {process.pid}): {error}")
                settled.set_result(
                    Failure(
                        ErrorKind.EXTERNAL_TOOL_FAILURE,
                        f"Failed to read Auggie CLI output: {error}",
                    )
                )
                return
            exit_code, stdout, stderr = watcher.result()
            settled.set_result(
                self._interpret(exit_code, stdout, stderr, time.monotonic() - started)
            )

        watcher = asyncio.create_task(self._collect(process))
        self._watchers.add(watcher)
        watcher.add_done_callback(self._watchers.discard)
        watcher.add_done_callback(on_exit)

        try:
            return await settled
        except asyncio.CancelledError:
            timer.cancel()
            if process.returncode is None:
                self._terminate(process)
            raise

    def _interpret(
        self, exit_code: Optional[int], stdout: str, stderr: str, elapsed: float
    ) -> ExecutionOutcome:
        duration_ms = max(0, int(elapsed * 1000))
        logger.info(f"Auggie CLI exited with code {exit_code} after {duration_ms} ms")

        if exit_code != 0:
            return classify_exit(exit_code, stderr, stdout)

        return Success(
            QueryResult(answer=stdout.strip(), usage=Usage(duration_ms=duration_ms))
        )

    async def _collect(
        self, process: asyncio.subprocess.Process
    ) -> Tuple[int, str, str]:
        """Drain both pipes until EOF, then reap the process."""
        stdout, stderr = await asyncio.gather(
            self._drain(process.stdout),
            self._drain(process.stderr),
        )
        exit_code = await process.wait()
        return exit_code, stdout, stderr

    @staticmethod
    async def _drain(stream: Optional[asyncio.StreamReader]) -> str:
        if stream is None:
            return ""
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        parts: List[str] = []
        while True:
            chunk = await stream.read(READ_CHUNK_SIZE)
            if not chunk:
                break
            parts.append(decoder.decode(chunk))
        parts.append(decoder.decode(b"", final=True))
        return "".join(parts)

    @staticmethod
    def _terminate(process: asyncio.subprocess.Process) -> None:
        try:
            process.terminate()
        except ProcessLookupError:
            # Exited between the check and the signal
            pass
