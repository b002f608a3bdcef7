"""Tests for Catalog: list, get, and search marketplace plugins."""

from pathlib import Path

import pytest

from plugin_marketplace_sdk import (
    Catalog,
    MarketplaceManifest,
    PluginMatch,
    PluginNotFoundError,
    PluginSummary,
    load_marketplace,
)

MARKETPLACE = Path(__file__).resolve().parent / "fixtures" / "marketplace"


def _catalog(**kwargs) -> Catalog:
    return Catalog.from_path(MARKETPLACE, **kwargs)


# --- list_plugins ---


def test_list_plugins_skips_disabled():
    names = [p.name for p in _catalog().list_plugins()]
    assert names == ["example-plugin", "formatter", "remote-tools"]


def test_list_plugins_include_disabled():
    plugins = _catalog(include_disabled=True).list_plugins()
    assert len(plugins) == 4
    legacy = plugins[-1]
    assert legacy.name == "legacy-deploy"
    assert legacy.enabled is False


def test_plugin_summary_fields():
    summary = _catalog().list_plugins()[2]
    assert isinstance(summary, PluginSummary)
    assert summary.name == "remote-tools"
    assert summary.source_kind == "url"
    assert summary.homepage == "https://github.com/example/remote-tools"


def test_catalog_len_and_marketplace():
    catalog = _catalog()
    assert len(catalog) == 3
    assert catalog.marketplace == "example-marketplace"


# --- get ---


def test_get_returns_entry():
    entry = _catalog().get("formatter")
    assert entry.keywords == ["format", "style"]


def test_get_disabled_not_indexed():
    with pytest.raises(PluginNotFoundError):
        _catalog().get("legacy-deploy")


def test_get_missing():
    with pytest.raises(PluginNotFoundError) as exc:
        _catalog().get("nope")
    assert exc.value.marketplace == "example-marketplace"


# --- search ---


def test_search_by_name_scores_highest():
    results = _catalog().search("formatter")
    assert results[0].plugin.name == "formatter"
    assert results[0].score == 1.0


def test_search_by_description():
    results = _catalog().search("deployment")
    assert [m.plugin.name for m in results] == ["remote-tools"]
    assert results[0].score == 0.5


def test_search_by_tag_and_keyword():
    assert [m.plugin.name for m in _catalog().search("security")] == ["example-plugin"]
    assert [m.plugin.name for m in _catalog().search("style")] == ["formatter"]


def test_search_ranking_and_ties():
    manifest = MarketplaceManifest.model_validate(
        {
            "name": "m",
            "plugins": [
                {"name": "zeta-review", "source": "./z"},
                {"name": "alpha-review", "source": "./a"},
                {"name": "helper", "description": "review helper", "source": "./h"},
            ],
        }
    )
    results = Catalog.from_manifest(manifest).search("review")
    assert [m.plugin.name for m in results] == ["alpha-review", "zeta-review", "helper"]
    assert all(isinstance(m, PluginMatch) for m in results)


def test_search_no_match():
    assert _catalog().search("kubernetes") == []


def test_search_empty_query_returns_all_up_to_limit():
    results = _catalog().search("", limit=2)
    assert [m.plugin.name for m in results] == ["example-plugin", "formatter"]
    assert all(m.score == 1.0 for m in results)


def test_search_limit():
    assert len(_catalog().search("code review format deploy", limit=1)) == 1


def test_from_manifest_matches_from_path():
    manifest = load_marketplace(MARKETPLACE)
    assert Catalog.from_manifest(manifest).list_plugins() == _catalog().list_plugins()


def test_entries_keeps_duplicates_in_order():
    manifest = MarketplaceManifest.model_validate(
        {
            "name": "m",
            "plugins": [
                {"name": "dup", "source": "./one"},
                {"name": "dup", "source": "./two"},
            ],
        }
    )
    entries = Catalog.from_manifest(manifest).entries()
    assert [e.source.path for e in entries] == ["./one", "./two"]
