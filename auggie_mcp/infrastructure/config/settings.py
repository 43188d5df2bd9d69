from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Raw settings loaded from environment variables.

    Values are kept as given; validation and defaults are applied when they
    are folded into a ServerConfig.
    """

    # Auggie CLI
    model: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("AUGGIE_MODEL", "AUGMENT_MODEL")
    )
    output_format: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("AUGGIE_OUTPUT_FORMAT", "AUGMENT_OUTPUT_FORMAT"),
    )
    timeout_sec: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("AUGGIE_TIMEOUT_SEC", "AUGMENT_TIMEOUT_SEC"),
    )
    rules_path: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("AUGGIE_RULES_PATH", "AUGMENT_RULES_PATH"),
    )
    command: Optional[str] = Field(default=None, validation_alias="AUGGIE_CLI_PATH")

    # Consumed by the CLI itself; only its presence is reported
    session_auth: Optional[SecretStr] = Field(
        default=None, validation_alias="AUGMENT_SESSION_AUTH"
    )

    # Logging
    log_level: str = Field(default="INFO", validation_alias="AUGGIE_MCP_LOG_LEVEL")
    json_logs: bool = Field(default=False, validation_alias="AUGGIE_MCP_JSON_LOGS")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_ignore_empty": True,
        "extra": "ignore",
        "protected_namespaces": (),
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
