from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def split_tool_list(v: object) -> object:
    """Accept "Read, Grep" as well as ["Read", "Grep"] in frontmatter."""
    if isinstance(v, str):
        return [t.strip() for t in v.split(",") if t.strip()]
    if v is None:
        return []
    return v


class SkillDefinition(BaseModel):
    """A skills/<slug>/SKILL.md document: frontmatter plus markdown guidance."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str | None = None
    description: str | None = None
    disable_model_invocation: bool = Field(False, alias="disable-model-invocation")
    allowed_tools: list[str] = Field(default_factory=list, alias="allowed-tools")
    slug: str | None = None  # directory name under skills/
    body: str = ""

    @field_validator("allowed_tools", mode="before")
    @classmethod
    def _parse_tools_string(cls, v: object) -> object:
        return split_tool_list(v)
