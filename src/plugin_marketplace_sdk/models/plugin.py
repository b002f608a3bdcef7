from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class Author(BaseModel):
    """Plugin author or maintainer."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str
    email: str | None = None
    url: str | None = None


class PluginManifest(BaseModel):
    """Contents of .claude-plugin/plugin.json."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str
    version: str | None = None
    description: str | None = None
    author: Author | None = None
    license: str | None = None
    homepage: str | None = None
    repository: str | None = None
    keywords: list[str] = []

    @field_validator("author", mode="before")
    @classmethod
    def _parse_author_string(cls, v: object) -> object:
        if isinstance(v, str):
            return {"name": v}
        return v
