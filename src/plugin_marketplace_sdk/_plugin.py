from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from .models.agent import AgentDefinition
    from .models.command import CommandDefinition
    from .models.hook import HooksConfig
    from .models.mcp import MCPServersConfig
    from .models.plugin import PluginManifest
    from .models.skill import SkillDefinition


@dataclass
class Plugin:
    """A plugin directory read from disk.

    Attributes:
        root: Path to the plugin directory.
        manifest: Parsed .claude-plugin/plugin.json, or None if absent.
        commands: commands/*.md, sorted by file name.
        skills: skills/*/SKILL.md, sorted by directory name.
        agents: agents/*.md, sorted by file name.
        hooks: Parsed hooks/hooks.json, or None if absent.
        mcp_servers: Parsed .mcp.json, or None if absent.
    """

    root: Path
    manifest: PluginManifest | None = None
    commands: list[CommandDefinition] = field(default_factory=list)
    skills: list[SkillDefinition] = field(default_factory=list)
    agents: list[AgentDefinition] = field(default_factory=list)
    hooks: HooksConfig | None = None
    mcp_servers: MCPServersConfig | None = None

    @property
    def name(self) -> str:
        if self.manifest is not None:
            return self.manifest.name
        return self.root.name
