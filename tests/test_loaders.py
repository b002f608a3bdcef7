from pathlib import Path

import pytest
from pydantic import ValidationError

from plugin_marketplace_sdk import (
    LoadError,
    load_agent,
    load_command,
    load_marketplace,
    load_plugin,
    load_plugin_manifest,
    load_skill,
    marketplace_root,
)
from plugin_marketplace_sdk.models.marketplace import LocalSource, UrlSource

FIXTURE_ROOT = Path(__file__).resolve().parent / "fixtures"
MARKETPLACE = FIXTURE_ROOT / "marketplace"
PLUGIN = MARKETPLACE / "plugins" / "example-plugin"


# --- load_marketplace ---


def test_load_marketplace_from_directory():
    m = load_marketplace(MARKETPLACE)
    assert m.name == "example-marketplace"
    assert len(m.plugins) == 4


def test_load_marketplace_from_file():
    m = load_marketplace(MARKETPLACE / ".claude-plugin" / "marketplace.json")
    assert m.name == "example-marketplace"


def test_load_marketplace_root_level_file(tmp_path):
    (tmp_path / "marketplace.json").write_text('{"name": "flat", "plugins": []}')
    assert load_marketplace(tmp_path).name == "flat"


def test_load_marketplace_source_types():
    m = load_marketplace(MARKETPLACE)
    sources = {p.name: p.source for p in m.plugins}
    assert isinstance(sources["example-plugin"], LocalSource)
    assert isinstance(sources["formatter"], LocalSource)
    assert isinstance(sources["remote-tools"], UrlSource)
    assert sources["remote-tools"].ref == "v1.2.0"


def test_load_marketplace_not_found():
    with pytest.raises(LoadError) as exc:
        load_marketplace(FIXTURE_ROOT / "nonexistent")
    assert exc.value.path == FIXTURE_ROOT / "nonexistent"


def test_load_marketplace_invalid_json(tmp_path):
    bad = tmp_path / ".claude-plugin" / "marketplace.json"
    bad.parent.mkdir(parents=True)
    bad.write_text("{ not valid json }")
    with pytest.raises(LoadError) as exc:
        load_marketplace(tmp_path)
    assert exc.value.path == bad


def test_load_marketplace_undecodable_bytes(tmp_path):
    bad = tmp_path / "marketplace.json"
    bad.write_bytes(b'{"name": "\xff", "plugins": []}')
    with pytest.raises(LoadError) as exc:
        load_marketplace(tmp_path)
    assert exc.value.path == bad
    assert "Cannot read" in str(exc.value)


def test_load_marketplace_invalid_schema(tmp_path):
    bad = tmp_path / ".claude-plugin" / "marketplace.json"
    bad.parent.mkdir(parents=True)
    bad.write_text('{"plugins": []}')  # missing required 'name'
    with pytest.raises(ValidationError):
        load_marketplace(tmp_path)


def test_marketplace_root_from_directory():
    assert marketplace_root(MARKETPLACE) == MARKETPLACE.resolve()


def test_marketplace_root_from_claude_plugin_file():
    path = MARKETPLACE / ".claude-plugin" / "marketplace.json"
    assert marketplace_root(path) == MARKETPLACE.resolve()


def test_marketplace_root_flat_layout(tmp_path):
    (tmp_path / "marketplace.json").write_text('{"name": "flat", "plugins": []}')
    assert marketplace_root(tmp_path) == tmp_path.resolve()


# --- load_plugin ---


def test_load_plugin_end_to_end():
    p = load_plugin(PLUGIN)
    assert p.manifest is not None
    assert p.name == "example-plugin"
    assert len(p.commands) == 1
    assert len(p.skills) == 1
    assert len(p.agents) == 1
    assert p.hooks is not None
    assert p.mcp_servers is not None
    assert p.mcp_servers.server_names == ["review-db"]


def test_load_plugin_command_name_from_stem():
    p = load_plugin(PLUGIN)
    assert p.commands[0].name == "review"
    assert p.commands[0].allowed_tools == ["Read", "Grep", "Glob", "Bash"]


def test_load_plugin_skill_slug_and_body():
    p = load_plugin(PLUGIN)
    skill = p.skills[0]
    assert skill.slug == "code-review"
    assert "security" in skill.body.lower()


def test_load_plugin_not_a_directory():
    with pytest.raises(LoadError):
        load_plugin(PLUGIN / ".claude-plugin" / "plugin.json")


def test_load_plugin_no_manifest(tmp_path):
    """A plugin without plugin.json is valid and named after its directory."""
    (tmp_path / "commands").mkdir()
    p = load_plugin(tmp_path)
    assert p.manifest is None
    assert p.commands == []
    assert p.name == tmp_path.name


def test_load_plugin_invalid_hooks_json(tmp_path):
    (tmp_path / "hooks").mkdir()
    (tmp_path / "hooks" / "hooks.json").write_text("{")
    with pytest.raises(LoadError):
        load_plugin(tmp_path)


def test_load_plugin_undecodable_manifest(tmp_path):
    (tmp_path / ".claude-plugin").mkdir()
    (tmp_path / ".claude-plugin" / "plugin.json").write_bytes(b'{"name": "\xff"}')
    with pytest.raises(LoadError):
        load_plugin(tmp_path)


# --- load_plugin_manifest ---


def test_load_plugin_manifest_from_directory():
    assert load_plugin_manifest(PLUGIN).version == "1.2.0"


def test_load_plugin_manifest_from_file():
    path = MARKETPLACE / "plugins" / "formatter" / ".claude-plugin" / "plugin.json"
    m = load_plugin_manifest(path)
    assert m.name == "formatter"
    assert m.author is not None
    assert m.author.name == "Format Team"


def test_load_plugin_manifest_missing(tmp_path):
    with pytest.raises(LoadError):
        load_plugin_manifest(tmp_path)


# --- individual loaders ---


def test_load_agent():
    a = load_agent(PLUGIN / "agents" / "reviewer.md")
    assert a.name == "example-reviewer"
    assert a.color == "cyan"
    assert a.tools == ["Read", "Grep"]


def test_load_skill():
    s = load_skill(PLUGIN / "skills" / "code-review" / "SKILL.md")
    assert s.name == "code-review"
    assert s.disable_model_invocation is True


def test_load_command():
    c = load_command(PLUGIN / "commands" / "review.md")
    assert c.argument_hint == "[--strict]"
    assert c.description == "Review the staged changes"


def test_load_command_name_in_frontmatter_wins(tmp_path):
    md = tmp_path / "cmd.md"
    md.write_text("---\nname: custom\n---\nbody\n")
    assert load_command(md).name == "custom"


def test_load_skill_missing_file(tmp_path):
    with pytest.raises(LoadError):
        load_skill(tmp_path / "skills" / "nope" / "SKILL.md")


def test_load_skill_bad_frontmatter(tmp_path):
    md = tmp_path / "SKILL.md"
    md.write_text("---\nname: [unclosed\n---\nbody\n")
    with pytest.raises(LoadError):
        load_skill(md)
