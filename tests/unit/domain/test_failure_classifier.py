"""
Unit tests for nonzero-exit classification.
"""

import pytest

from auggie_mcp.domain.services.failure_classifier import classify_exit
from auggie_mcp.domain.value_objects.error_kind import ErrorKind


class TestClassifyExit:
    """Tests for classify_exit."""

    @pytest.mark.parametrize(
        "stderr",
        [
            "Error: not logged in",
            "authentication failed for session",
            "401 unauthorized",
        ],
    )
    def test_auth_phrases_in_stderr(self, stderr):
        """Test each known phrase yields an authentication failure."""
        failure = classify_exit(1, stderr, "")

        assert failure.kind is ErrorKind.AUTHENTICATION_REQUIRED
        assert "auggie login" in failure.message
        assert "AUGMENT_SESSION_AUTH" in failure.message
        assert stderr in failure.message

    def test_auth_phrase_in_stdout_when_stderr_empty(self):
        """Test stdout is inspected when stderr is blank."""
        failure = classify_exit(2, "   \n", "you are not logged in\n")

        assert failure.kind is ErrorKind.AUTHENTICATION_REQUIRED
        assert "Error details: you are not logged in" in failure.message

    def test_stderr_takes_precedence_over_stdout(self):
        """Test stdout is ignored for matching when stderr has text."""
        failure = classify_exit(1, "disk full", "unauthorized")

        assert failure.kind is ErrorKind.EXTERNAL_TOOL_FAILURE

    def test_matching_is_case_sensitive(self):
        """Test that capitalised phrases are not treated as auth failures."""
        failure = classify_exit(1, "Unauthorized", "")

        assert failure.kind is ErrorKind.EXTERNAL_TOOL_FAILURE

    def test_generic_failure_carries_everything(self):
        """Test the generic failure message lists exit code and both streams."""
        failure = classify_exit(3, "  boom \n", " partial output ")

        assert failure.kind is ErrorKind.EXTERNAL_TOOL_FAILURE
        assert failure.message == (
            "Auggie CLI failed with exit code 3\n"
            "STDERR: boom\n"
            "STDOUT: partial output"
        )

    def test_generic_failure_with_no_output(self):
        """Test empty streams are shown as placeholders."""
        failure = classify_exit(-15, "", "")

        assert failure.kind is ErrorKind.EXTERNAL_TOOL_FAILURE
        assert "exit code -15" in failure.message
        assert "STDERR: <empty>" in failure.message
        assert "STDOUT: <empty>" in failure.message
