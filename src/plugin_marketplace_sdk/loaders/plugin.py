from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TypeVar

import frontmatter  # type: ignore[import-untyped]
from pydantic import BaseModel

from .._plugin import Plugin
from ..errors import LoadError
from ..models.agent import AgentDefinition
from ..models.command import CommandDefinition
from ..models.hook import HooksConfig
from ..models.mcp import MCPServersConfig
from ..models.plugin import PluginManifest
from ..models.skill import SkillDefinition

logger = logging.getLogger(__name__)

PLUGIN_FILE = "plugin.json"

_T = TypeVar("_T", bound=BaseModel)


def load_plugin(path: Path) -> Plugin:
    """Load a plugin from its root directory.

    Discovers commands, skills, agents, hooks and MCP servers at their default
    locations. The manifest at .claude-plugin/plugin.json is optional.
    """
    path = Path(path)
    if not path.is_dir():
        raise LoadError(f"Plugin path is not a directory: {path}", path=path)

    logger.debug("Loading plugin from %s", path)
    manifest_path = path / ".claude-plugin" / PLUGIN_FILE
    manifest = _load_optional_json(manifest_path, PluginManifest)
    return Plugin(
        root=path,
        manifest=manifest,
        commands=[load_command(f) for f in command_files(path)],
        skills=[load_skill(f) for f in skill_files(path)],
        agents=[load_agent(f) for f in agent_files(path)],
        hooks=_load_optional_json(path / "hooks" / "hooks.json", HooksConfig),
        mcp_servers=_load_optional_json(path / ".mcp.json", MCPServersConfig),
    )


def load_plugin_manifest(path: Path) -> PluginManifest:
    """Load plugin.json from a file path or a plugin directory."""
    path = Path(path)
    if path.is_dir():
        path = path / ".claude-plugin" / PLUGIN_FILE
    manifest = _load_optional_json(path, PluginManifest)
    if manifest is None:
        raise LoadError(f"Plugin manifest not found: {path}", path=path)
    return manifest


def load_skill(path: Path) -> SkillDefinition:
    """Load a skill definition from a SKILL.md file."""
    path = Path(path)
    data = _frontmatter_dict(path)
    data.setdefault("slug", path.parent.name)
    return SkillDefinition.model_validate(data)


def load_command(path: Path) -> CommandDefinition:
    """Load a command definition from a .md file."""
    path = Path(path)
    data = _frontmatter_dict(path)
    if not data.get("name"):
        data["name"] = path.stem
    return CommandDefinition.model_validate(data)


def load_agent(path: Path) -> AgentDefinition:
    """Load a single agent definition from a .md file."""
    return AgentDefinition.model_validate(_frontmatter_dict(Path(path)))


def command_files(root: Path) -> list[Path]:
    return _sorted_glob(root / "commands", "*.md")


def skill_files(root: Path) -> list[Path]:
    return _sorted_glob(root / "skills", "*/SKILL.md")


def agent_files(root: Path) -> list[Path]:
    return _sorted_glob(root / "agents", "*.md")


# --- internal helpers ---


def _sorted_glob(directory: Path, pattern: str) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(directory.glob(pattern))


def _frontmatter_dict(path: Path) -> dict:
    try:
        post = frontmatter.load(str(path))
    except FileNotFoundError as e:
        raise LoadError(f"File not found: {path}", path=path) from e
    except Exception as e:
        raise LoadError(f"Failed to parse {path}: {e}", path=path) from e
    data = dict(post.metadata)
    data["body"] = post.content
    return data


def _load_optional_json(path: Path, model_class: type[_T]) -> _T | None:
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {path}: {e}", path=path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read {path}: {e}", path=path) from e
    return model_class.model_validate(data)
