from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from pathlib import Path

PLUGIN_ROOT_VAR = "${CLAUDE_PLUGIN_ROOT}"


class MCPServerConfig(BaseModel):
    """How the host launches one MCP server (stdio command line)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    command: str
    args: list[str] = []
    env: dict[str, str] = {}
    cwd: str | None = None

    def with_plugin_root(self, root: Path) -> MCPServerConfig:
        """Return a copy with ${CLAUDE_PLUGIN_ROOT} replaced by root."""
        r = str(root)
        return self.model_copy(
            update={
                "command": self.command.replace(PLUGIN_ROOT_VAR, r),
                "args": [a.replace(PLUGIN_ROOT_VAR, r) for a in self.args],
                "env": {k: v.replace(PLUGIN_ROOT_VAR, r) for k, v in self.env.items()},
                "cwd": self.cwd.replace(PLUGIN_ROOT_VAR, r) if self.cwd else None,
            }
        )


class MCPServersConfig(BaseModel):
    """Contents of .mcp.json: server name -> MCPServerConfig."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    mcp_servers: dict[str, MCPServerConfig] = Field(default_factory=dict, alias="mcpServers")

    @property
    def server_names(self) -> list[str]:
        return sorted(self.mcp_servers)
