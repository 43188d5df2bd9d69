"""
Shared pytest fixtures for all tests.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Callable
from unittest.mock import AsyncMock

import pytest

from auggie_mcp.domain.entities.execution_outcome import QueryResult, Success, Usage
from auggie_mcp.domain.value_objects.query_request import QueryRequest
from auggie_mcp.application.interfaces.i_query_executor import IQueryExecutor
from auggie_mcp.infrastructure.config.server_config import ServerConfig


AUGGIE_ENV_VARS = [
    "AUGGIE_MODEL",
    "AUGMENT_MODEL",
    "AUGGIE_OUTPUT_FORMAT",
    "AUGMENT_OUTPUT_FORMAT",
    "AUGGIE_TIMEOUT_SEC",
    "AUGMENT_TIMEOUT_SEC",
    "AUGGIE_RULES_PATH",
    "AUGMENT_RULES_PATH",
    "AUGGIE_CLI_PATH",
    "AUGMENT_SESSION_AUTH",
    "AUGGIE_MCP_LOG_LEVEL",
    "AUGGIE_MCP_JSON_LOGS",
]


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch, tmp_path) -> None:
    """Remove every Auggie variable and step away from any .env file."""
    for name in AUGGIE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


# ============================================================================
# Value Object Fixtures
# ============================================================================


@pytest.fixture
def test_request() -> QueryRequest:
    return QueryRequest(query="find the login handler")


@pytest.fixture
def workspace_request(tmp_path) -> QueryRequest:
    return QueryRequest(query="find the login handler", workspace_root=str(tmp_path))


@pytest.fixture
def default_config() -> ServerConfig:
    return ServerConfig()


# ============================================================================
# Mock Service Fixtures
# ============================================================================


@pytest.fixture
def success_outcome() -> Success:
    return Success(
        QueryResult(answer="src/auth/login.ts:42", usage=Usage(duration_ms=1200))
    )


@pytest.fixture
def mock_query_executor(success_outcome) -> AsyncMock:
    """Mock IQueryExecutor."""
    mock = AsyncMock(spec=IQueryExecutor)
    mock.execute.return_value = success_outcome
    return mock


# ============================================================================
# Fake CLI Fixtures
# ============================================================================


@pytest.fixture
def fake_cli(tmp_path) -> Callable[[str], str]:
    """Factory writing an executable shell script that stands in for auggie."""

    def _make(body: str, name: str = "auggie") -> str:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        script = bin_dir / name
        script.write_text("#!/bin/sh\n" + body + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(script)

    return _make


@pytest.fixture
def missing_cli(tmp_path) -> str:
    path = Path(tmp_path) / "no-such-dir" / "auggie"
    assert not os.path.exists(path)
    return str(path)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after setup_logging ran."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
