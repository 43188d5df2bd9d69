from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from auggie_mcp.domain.value_objects.query_request import QueryRequest


class QueryCodebaseArgs(BaseModel):
    """Arguments accepted by the query_codebase tool."""

    model_config = ConfigDict(extra="ignore")

    query: str = Field(
        min_length=1, description="The question or query about the codebase"
    )
    workspace_root: Optional[str] = Field(
        default=None,
        description="Absolute path to the workspace/repository root. "
        "Defaults to current directory.",
    )

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("query must not be blank")
        return value

    @field_validator("workspace_root")
    @classmethod
    def empty_root_means_default(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    def to_request(self) -> QueryRequest:
        return QueryRequest(query=self.query, workspace_root=self.workspace_root)


QUERY_CODEBASE_INPUT_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "query": {
            "type": "string",
            "description": "The question or query about the codebase",
        },
        "workspace_root": {
            "type": "string",
            "description": "Absolute path to the workspace/repository root. "
            "Defaults to current directory.",
        },
    },
    "required": ["query"],
}
