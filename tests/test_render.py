from pathlib import Path

from plugin_marketplace_sdk import (
    LocalSource,
    MarketplaceManifest,
    UrlSource,
    describe_source,
    load_marketplace,
    load_plugin,
    marketplace_json_schema,
    plugin_json_schema,
    render_marketplace,
    render_plugin,
)

MARKETPLACE = Path(__file__).resolve().parent / "fixtures" / "marketplace"
PLUGIN = MARKETPLACE / "plugins" / "example-plugin"


def test_describe_source():
    assert describe_source(LocalSource(source="local", path="./p")) == "local ./p"
    assert describe_source(UrlSource(source="url", url="https://x/y.git")) == "url https://x/y.git"
    assert (
        describe_source(UrlSource(source="url", url="https://x/y.git", ref="v1"))
        == "url https://x/y.git @ v1"
    )


def test_render_marketplace_fixture():
    text = render_marketplace(load_marketplace(MARKETPLACE))
    lines = text.splitlines()
    assert lines[0] == "# example-marketplace"
    assert "Plugins for reviewing, formatting and shipping code" in lines
    assert "Maintained by Test Author <author@example.com>." in lines
    assert "| Plugin | Description | Source | Homepage |" in lines
    assert (
        "| example-plugin | Code review commands and a security-focused review skill "
        "| local ./plugins/example-plugin | <https://example.com/example-plugin> |"
    ) in lines
    assert (
        "| formatter | Formats source files before commit | local plugins/formatter |  |"
    ) in lines
    assert "legacy-deploy" not in text
    assert text.endswith("\n")


def test_render_marketplace_include_disabled():
    text = render_marketplace(load_marketplace(MARKETPLACE), include_disabled=True)
    assert "| legacy-deploy (disabled) | Old deployment helpers |" in text


def test_render_marketplace_escapes_pipes():
    m = MarketplaceManifest.model_validate(
        {
            "name": "m",
            "plugins": [
                {"name": "p", "description": "a | b\nc", "source": "./p"},
                {"name": "q", "source": "./q", "homepage": "https://x/a|b"},
            ],
        }
    )
    text = render_marketplace(m)
    assert "| p | a \\| b c | local ./p |  |" in text
    assert "| q |  | local ./q | <https://x/a\\|b> |" in text


def test_render_marketplace_no_plugins():
    m = MarketplaceManifest.model_validate({"name": "empty", "plugins": []})
    assert render_marketplace(m) == "# empty\n\n_No plugins._\n"


def test_render_plugin_fixture():
    text = render_plugin(load_plugin(PLUGIN))
    lines = text.splitlines()
    assert lines[0] == "# example-plugin"
    assert "version 1.2.0 · license MIT · by Test Author" in lines
    assert "## Commands" in lines
    assert "- `/review`: Review the staged changes" in lines
    assert "## Skills" in lines
    assert (
        "- `code-review`: Review code for bugs, security issues, and quality improvements"
    ) in lines
    assert "- `example-reviewer`: Reviews pull requests" in lines
    assert "- `review-db`" in lines


def test_render_plugin_without_manifest(tmp_path):
    plugin_dir = tmp_path / "bare-plugin"
    (plugin_dir / "commands").mkdir(parents=True)
    (plugin_dir / "commands" / "hello.md").write_text("Say hello.\n")
    text = render_plugin(load_plugin(plugin_dir))
    assert text == "# bare-plugin\n\n## Commands\n\n- `/hello`\n"


def test_marketplace_json_schema_uses_aliases():
    schema = marketplace_json_schema()
    assert "$schema" in schema["properties"]
    assert set(schema["required"]) == {"name", "plugins"}


def test_plugin_json_schema():
    schema = plugin_json_schema()
    assert schema["required"] == ["name"]
    assert "version" in schema["properties"]
