"""Markdown and JSON Schema renderings of marketplace and plugin manifests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .models.marketplace import LocalSource, MarketplaceManifest, UrlSource
from .models.plugin import PluginManifest

if TYPE_CHECKING:
    from ._plugin import Plugin
    from .models.marketplace import PluginEntry


def describe_source(source: UrlSource | LocalSource) -> str:
    """One-line description of a plugin source, e.g. "url https://x/y.git @ v1"."""
    if isinstance(source, UrlSource):
        text = f"url {source.url}"
        if source.ref:
            text += f" @ {source.ref}"
        return text
    return f"local {source.path}"


def render_marketplace(manifest: MarketplaceManifest, include_disabled: bool = False) -> str:
    """Render a marketplace as a markdown page with one table row per plugin.

    Disabled entries are left out unless include_disabled is set, in which case
    their name is suffixed with "(disabled)".
    """
    lines = [f"# {manifest.name}", ""]
    if manifest.description:
        lines += [manifest.description.strip(), ""]
    if manifest.owner is not None:
        owner = manifest.owner.name
        if manifest.owner.email:
            owner += f" <{manifest.owner.email}>"
        lines += [f"Maintained by {owner}.", ""]

    entries = manifest.plugins if include_disabled else manifest.enabled_plugins()
    if not entries:
        lines.append("_No plugins._")
        return "\n".join(lines) + "\n"

    lines += [
        "| Plugin | Description | Source | Homepage |",
        "| --- | --- | --- | --- |",
    ]
    lines += [_entry_row(e) for e in entries]
    return "\n".join(lines) + "\n"


def render_plugin(plugin: Plugin) -> str:
    """Render a loaded plugin as markdown: header, metadata, commands and skills."""
    m = plugin.manifest
    lines = [f"# {plugin.name}", ""]

    facts = []
    if m is not None:
        if m.version:
            facts.append(f"version {m.version}")
        if m.license:
            facts.append(f"license {m.license}")
        if m.author is not None:
            facts.append(f"by {m.author.name}")
    if facts:
        lines += [" · ".join(facts), ""]
    if m is not None and m.description:
        lines += [m.description.strip(), ""]

    if plugin.commands:
        lines += ["## Commands", ""]
        lines += [_bullet(f"/{c.name}", c.description) for c in plugin.commands]
        lines.append("")
    if plugin.skills:
        lines += ["## Skills", ""]
        lines += [_bullet(s.name or s.slug or "?", s.description) for s in plugin.skills]
        lines.append("")
    if plugin.agents:
        lines += ["## Agents", ""]
        lines += [_bullet(a.name, a.description) for a in plugin.agents]
        lines.append("")
    if plugin.mcp_servers is not None and plugin.mcp_servers.server_names:
        lines += ["## MCP servers", ""]
        lines += [f"- `{n}`" for n in plugin.mcp_servers.server_names]
        lines.append("")
    return "\n".join(lines).rstrip("\n") + "\n"


def marketplace_json_schema() -> dict[str, Any]:
    return MarketplaceManifest.model_json_schema(by_alias=True)


def plugin_json_schema() -> dict[str, Any]:
    return PluginManifest.model_json_schema(by_alias=True)


# --- internal helpers ---


def _cell(text: str | None) -> str:
    if not text:
        return ""
    return " ".join(text.split()).replace("|", "\\|")


def _entry_row(entry: PluginEntry) -> str:
    name = entry.name if entry.enabled else f"{entry.name} (disabled)"
    homepage = f"<{_cell(entry.homepage)}>" if entry.homepage else ""
    cells = [_cell(name), _cell(entry.description), _cell(describe_source(entry.source)), homepage]
    return "| " + " | ".join(cells) + " |"


def _bullet(label: str | None, description: str | None) -> str:
    if description:
        return f"- `{label}`: {' '.join(description.split())}"
    return f"- `{label}`"
