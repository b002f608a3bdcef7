from .agent import AgentDefinition
from .command import CommandDefinition
from .hook import HookAction, HookMatcher, HooksConfig
from .marketplace import (
    HttpSource,
    LocalSource,
    MarketplaceManifest,
    Owner,
    PluginEntry,
    PluginSource,
    UrlSource,
)
from .mcp import MCPServerConfig, MCPServersConfig
from .plugin import Author, PluginManifest
from .skill import SkillDefinition

__all__ = [
    "AgentDefinition",
    "Author",
    "CommandDefinition",
    "HookAction",
    "HookMatcher",
    "HooksConfig",
    "HttpSource",
    "LocalSource",
    "MCPServerConfig",
    "MCPServersConfig",
    "MarketplaceManifest",
    "Owner",
    "PluginEntry",
    "PluginManifest",
    "PluginSource",
    "SkillDefinition",
    "UrlSource",
]
