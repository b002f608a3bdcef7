from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from .skill import split_tool_list


class AgentDefinition(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str
    description: str
    tools: list[str] = []
    model: str | None = None
    color: str | None = None
    body: str = ""

    @field_validator("tools", mode="before")
    @classmethod
    def _parse_tools_string(cls, v: object) -> object:
        return split_tool_list(v)
