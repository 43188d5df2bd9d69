from enum import Enum
from typing import Any


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"

    @classmethod
    def coerce(cls, value: Any) -> "OutputFormat":
        """Map any value onto a supported format, falling back to TEXT."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().lower() == cls.JSON.value:
            return cls.JSON
        return cls.TEXT
