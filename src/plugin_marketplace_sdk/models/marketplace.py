from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import PluginNotFoundError
from .plugin import Author  # noqa: TC001


class UrlSource(BaseModel):
    """Remote git repository holding the plugin."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    source: Literal["url"]
    url: str
    ref: str | None = None  # branch or tag


class LocalSource(BaseModel):
    """Directory relative to the marketplace root."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    source: Literal["local"]
    path: str


PluginSource = Annotated[UrlSource | LocalSource, Field(discriminator="source")]


class HttpSource(BaseModel):
    """Direct HTTP(S) URL to a marketplace.json file."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    source: Literal["http"]
    url: str


class Owner(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str
    email: str | None = None
    url: str | None = None


class PluginEntry(BaseModel):
    """A plugin listed in a marketplace manifest."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str
    source: PluginSource
    description: str | None = None
    homepage: str | None = None
    disabled: bool = False
    version: str | None = None
    author: Author | None = None
    license: str | None = None
    category: str | None = None
    keywords: list[str] = []
    tags: list[str] = []

    @field_validator("source", mode="before")
    @classmethod
    def _expand_path_shorthand(cls, v: object) -> object:
        # "./plugins/foo" is shorthand for {"source": "local", "path": "./plugins/foo"}
        if isinstance(v, str):
            return {"source": "local", "path": v}
        return v

    @field_validator("author", mode="before")
    @classmethod
    def _parse_author_string(cls, v: object) -> object:
        if isinstance(v, str):
            return {"name": v}
        return v

    @property
    def enabled(self) -> bool:
        return not self.disabled


class MarketplaceManifest(BaseModel):
    """Root object of marketplace.json."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    schema_url: str | None = Field(None, alias="$schema")
    name: str
    description: str | None = None
    version: str | None = None
    owner: Owner | None = None
    plugins: list[PluginEntry]

    def enabled_plugins(self) -> list[PluginEntry]:
        return [p for p in self.plugins if p.enabled]

    def get_plugin(self, name: str) -> PluginEntry:
        for entry in self.plugins:
            if entry.name == name:
                return entry
        raise PluginNotFoundError(name, self.name)
