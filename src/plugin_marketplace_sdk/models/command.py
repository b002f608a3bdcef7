from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .skill import split_tool_list


class CommandDefinition(BaseModel):
    """A commands/<name>.md slash command. name defaults to the file stem."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str | None = None
    description: str | None = None
    argument_hint: str | None = Field(None, alias="argument-hint")
    allowed_tools: list[str] = Field(default_factory=list, alias="allowed-tools")
    model: str | None = None
    body: str = ""

    @field_validator("allowed_tools", mode="before")
    @classmethod
    def _parse_tools_string(cls, v: object) -> object:
        return split_tool_list(v)
