import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from auggie_mcp.domain.value_objects.output_format import OutputFormat
from auggie_mcp.infrastructure.config.settings import Settings

DEFAULT_MODEL = "haiku4.5"
DEFAULT_TIMEOUT_SEC = 240
DEFAULT_COMMAND = "auggie"


def coerce_timeout(value: Any) -> int:
    """Whole seconds; anything unusable falls back to the default."""
    if isinstance(value, bool):
        return DEFAULT_TIMEOUT_SEC
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT_SEC
    if not math.isfinite(seconds) or seconds <= 0:
        return DEFAULT_TIMEOUT_SEC
    return math.ceil(seconds)


class ServerConfig(BaseModel):
    """Process-wide configuration for the Auggie CLI, frozen once resolved."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model: str = DEFAULT_MODEL
    rules_path: Optional[str] = None
    timeout_sec: int = DEFAULT_TIMEOUT_SEC
    output_format: OutputFormat = OutputFormat.TEXT
    command: str = DEFAULT_COMMAND

    @field_validator("timeout_sec", mode="before")
    @classmethod
    def _timeout(cls, value: Any) -> int:
        return coerce_timeout(value)

    @field_validator("output_format", mode="before")
    @classmethod
    def _output_format(cls, value: Any) -> OutputFormat:
        return OutputFormat.coerce(value)

    @field_validator("model", "command", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("rules_path", mode="before")
    @classmethod
    def _empty_rules_path(cls, value: Any) -> Any:
        return value or None


def resolve_server_config(
    settings: Optional[Settings] = None, **overrides: Any
) -> ServerConfig:
    """Layer explicit overrides over environment settings over defaults.

    None (and blank strings) at any layer mean "not set" and defer to the
    next layer down.
    """
    settings = settings if settings is not None else Settings()
    values: dict[str, Any] = {}
    for name in ServerConfig.model_fields:
        for candidate in (overrides.get(name), getattr(settings, name, None)):
            if isinstance(candidate, str):
                candidate = candidate.strip()
            if candidate is not None and candidate != "":
                values[name] = candidate
                break
    return ServerConfig(**values)
