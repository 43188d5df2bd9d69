"""
Classification of a nonzero CLI exit.

Kept free of any process handling so the phrase matching can be tested and
replaced on its own. The phrases depend on the Auggie CLI's wording and are
matched case-sensitively.
"""

from ..entities.execution_outcome import Failure
from ..value_objects.error_kind import ErrorKind

AUTH_FAILURE_PHRASES = ("not logged in", "authentication", "unauthorized")

AUTH_GUIDANCE = (
    "Authentication required. Please either:\n"
    "1. Run 'auggie login' to authenticate, or\n"
    "2. Set AUGMENT_SESSION_AUTH environment variable "
    "(get token via 'auggie token print')"
)


def is_auth_failure(details: str) -> bool:
    return any(phrase in details for phrase in AUTH_FAILURE_PHRASES)


def classify_exit(exit_code: int | None, stderr: str, stdout: str) -> Failure:
    """Turn a nonzero exit into an authentication or generic tool failure.

    Args:
        exit_code: Process return code
        stderr: Everything the CLI wrote to standard error
        stdout: Everything the CLI wrote to standard output

    Returns:
        Failure of kind AUTHENTICATION_REQUIRED or EXTERNAL_TOOL_FAILURE
    """
    stderr_text = stderr.strip()
    stdout_text = stdout.strip()
    details = stderr_text or stdout_text

    if is_auth_failure(details):
        return Failure(
            kind=ErrorKind.AUTHENTICATION_REQUIRED,
            message=f"{AUTH_GUIDANCE}\n\nError details: {details or '<no details>'}",
        )

    return Failure(
        kind=ErrorKind.EXTERNAL_TOOL_FAILURE,
        message=(
            f"Auggie CLI failed with exit code {exit_code}\n"
            f"STDERR: {stderr_text or '<empty>'}\n"
            f"STDOUT: {stdout_text or '<empty>'}"
        ),
    )
