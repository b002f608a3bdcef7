"""Catalog: list, look up, and search the plugins of one marketplace."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .errors import PluginNotFoundError
from .loaders.marketplace import load_marketplace
from .models.marketplace import UrlSource

if TYPE_CHECKING:
    from pathlib import Path

    from .models.marketplace import MarketplaceManifest, PluginEntry


@dataclass(frozen=True)
class PluginSummary:
    """Display metadata for one marketplace entry."""

    name: str
    description: str | None
    source_kind: str  # "url" or "local"
    homepage: str | None = None
    enabled: bool = True

    @classmethod
    def from_entry(cls, entry: PluginEntry) -> PluginSummary:
        return cls(
            name=entry.name,
            description=entry.description,
            source_kind="url" if isinstance(entry.source, UrlSource) else "local",
            homepage=entry.homepage,
            enabled=entry.enabled,
        )


@dataclass(frozen=True)
class PluginMatch:
    """A plugin with a relevance score from a search."""

    plugin: PluginSummary
    score: float  # 0.0–1.0


@dataclass
class Catalog:
    """Read-only index over a marketplace's plugin entries.

    Build from a manifest or a path:

        catalog = Catalog.from_path(Path("my-marketplace"))
        plugins = catalog.list_plugins()
        results = catalog.search("code review")
        entry = catalog.get("code-review")
    """

    marketplace: str
    _entries: list[PluginEntry] = field(default_factory=list, repr=False)

    # --- factories ---

    @classmethod
    def from_manifest(
        cls, manifest: MarketplaceManifest, include_disabled: bool = False
    ) -> Catalog:
        entries = manifest.plugins if include_disabled else manifest.enabled_plugins()
        return cls(marketplace=manifest.name, _entries=list(entries))

    @classmethod
    def from_path(cls, path: Path, include_disabled: bool = False) -> Catalog:
        return cls.from_manifest(load_marketplace(path), include_disabled=include_disabled)

    # --- public API ---

    def entries(self) -> list[PluginEntry]:
        """Indexed entries, in manifest order."""
        return list(self._entries)

    def list_plugins(self) -> list[PluginSummary]:
        """Summaries of all indexed plugins, in manifest order."""
        return [PluginSummary.from_entry(e) for e in self._entries]

    def get(self, name: str) -> PluginEntry:
        """Return the full entry for a plugin.

        Raises:
            PluginNotFoundError: If the plugin is not indexed (absent or disabled).
        """
        for entry in self._entries:
            if entry.name == name:
                return entry
        raise PluginNotFoundError(name, self.marketplace)

    def search(self, query: str, limit: int = 10) -> list[PluginMatch]:
        """Search plugins by name, description, category, tags and keywords.

        Name matches count double. Results are sorted by score descending,
        ties broken by plugin name.
        """
        tokens = _tokenize(query)
        if not tokens:
            return [
                PluginMatch(plugin=PluginSummary.from_entry(e), score=1.0)
                for e in self._entries[:limit]
            ]

        results: list[PluginMatch] = []
        for entry in self._entries:
            score = _score(entry, tokens)
            if score > 0:
                results.append(PluginMatch(plugin=PluginSummary.from_entry(entry), score=score))

        results.sort(key=lambda m: (-m.score, m.plugin.name))
        return results[:limit]

    def __len__(self) -> int:
        return len(self._entries)


# --- internal helpers ---

_TOKEN_RE = re.compile(r"[a-z0-9]+")


def _tokenize(text: str | None) -> list[str]:
    return _TOKEN_RE.findall((text or "").lower())


def _score(entry: PluginEntry, query_tokens: list[str]) -> float:
    """Score an entry against query tokens. Returns 0.0–1.0."""
    name_tokens = set(_tokenize(entry.name))
    extra = [entry.description, entry.category, *entry.tags, *entry.keywords]
    other_tokens = set(_tokenize(" ".join(filter(None, extra))))

    hits = 0.0
    for t in query_tokens:
        if t in name_tokens:
            hits += 2.0
        elif t in other_tokens:
            hits += 1.0

    max_score = len(query_tokens) * 2.0
    return min(hits / max_score, 1.0)
