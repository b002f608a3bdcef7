"""Parse, validate, render and resolve plugin marketplace manifests."""

from ._plugin import Plugin
from .catalog import Catalog, PluginMatch, PluginSummary
from .config import Settings
from .errors import FetchError, LoadError, PluginNotFoundError
from .fetchers import (
    detect_source,
    fetch_marketplace,
    fetch_plugin,
    open_marketplace,
    resolve_plugin_source,
)
from .loaders import (
    load_agent,
    load_command,
    load_marketplace,
    load_plugin,
    load_plugin_manifest,
    load_skill,
    marketplace_root,
)
from .models import (
    AgentDefinition,
    Author,
    CommandDefinition,
    HttpSource,
    LocalSource,
    MarketplaceManifest,
    Owner,
    PluginEntry,
    PluginManifest,
    SkillDefinition,
    UrlSource,
)
from .render import (
    describe_source,
    marketplace_json_schema,
    plugin_json_schema,
    render_marketplace,
    render_plugin,
)
from .validation import (
    ValidationIssue,
    ValidationResult,
    validate_marketplace,
    validate_marketplace_dir,
    validate_marketplace_file,
    validate_plugin,
    validate_plugin_dir,
    validate_plugin_file,
)

__all__ = [
    "AgentDefinition",
    "Author",
    "Catalog",
    "CommandDefinition",
    "FetchError",
    "HttpSource",
    "LoadError",
    "LocalSource",
    "MarketplaceManifest",
    "Owner",
    "Plugin",
    "PluginEntry",
    "PluginManifest",
    "PluginMatch",
    "PluginNotFoundError",
    "PluginSummary",
    "Settings",
    "SkillDefinition",
    "UrlSource",
    "ValidationIssue",
    "ValidationResult",
    "describe_source",
    "detect_source",
    "fetch_marketplace",
    "fetch_plugin",
    "load_agent",
    "load_command",
    "load_marketplace",
    "load_plugin",
    "load_plugin_manifest",
    "load_skill",
    "marketplace_json_schema",
    "marketplace_root",
    "open_marketplace",
    "plugin_json_schema",
    "render_marketplace",
    "render_plugin",
    "resolve_plugin_source",
    "validate_marketplace",
    "validate_marketplace_dir",
    "validate_marketplace_file",
    "validate_plugin",
    "validate_plugin_dir",
    "validate_plugin_file",
]
