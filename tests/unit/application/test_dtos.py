"""
Unit tests for application layer DTOs.
"""

import pytest
from pydantic import ValidationError

from auggie_mcp.application.dtos.query_dtos import (
    QueryCodebaseArgs,
    QUERY_CODEBASE_INPUT_SCHEMA,
)
from auggie_mcp.domain.exceptions.domain_exceptions import InvalidArgumentsError


class TestQueryCodebaseArgs:
    """Tests for the query_codebase argument DTO."""

    def test_query_only(self):
        """Test arguments with just a query."""
        args = QueryCodebaseArgs(query="find the login handler")
        assert args.query == "find the login handler"
        assert args.workspace_root is None

    def test_missing_query(self):
        """Test that query is required."""
        with pytest.raises(ValidationError):
            QueryCodebaseArgs.model_validate({"workspace_root": "/repo"})

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_query(self, query):
        """Test that empty and blank queries are rejected."""
        with pytest.raises(ValidationError):
            QueryCodebaseArgs(query=query)

    def test_non_string_query(self):
        """Test that numbers are not accepted as queries."""
        with pytest.raises(ValidationError):
            QueryCodebaseArgs.model_validate({"query": 123})

    def test_empty_workspace_root_means_default(self):
        """Test an empty workspace root is treated as absent."""
        args = QueryCodebaseArgs(query="q", workspace_root="")
        assert args.workspace_root is None

    def test_unknown_fields_are_ignored(self):
        """Test that legacy per-request fields are dropped."""
        args = QueryCodebaseArgs.model_validate(
            {"query": "q", "timeout_sec": 5, "model": "other"}
        )
        assert args.model_dump() == {"query": "q", "workspace_root": None}

    def test_to_request(self, tmp_path):
        """Test conversion to the domain value object."""
        request = QueryCodebaseArgs(query="q", workspace_root=str(tmp_path)).to_request()

        assert request.query == "q"
        assert request.workspace_root == str(tmp_path)

    def test_to_request_rejects_relative_root(self):
        """Test the domain check on workspace_root still applies."""
        with pytest.raises(InvalidArgumentsError):
            QueryCodebaseArgs(query="q", workspace_root="src").to_request()


class TestInputSchema:
    """Tests for the advertised tool input schema."""

    def test_schema_shape(self):
        """Test only query and workspace_root are advertised."""
        assert QUERY_CODEBASE_INPUT_SCHEMA["type"] == "object"
        assert set(QUERY_CODEBASE_INPUT_SCHEMA["properties"]) == {
            "query",
            "workspace_root",
        }
        assert QUERY_CODEBASE_INPUT_SCHEMA["required"] == ["query"]
        for prop in QUERY_CODEBASE_INPUT_SCHEMA["properties"].values():
            assert prop["type"] == "string"
