from pathlib import Path

import pytest

from plugin_marketplace_sdk.errors import FetchError, LoadError, PluginNotFoundError


def test_load_error_message():
    err = LoadError("something went wrong")
    assert str(err) == "something went wrong"
    assert err.path is None


def test_load_error_with_path():
    p = Path("/some/file.json")
    err = LoadError("not found", path=p)
    assert err.path == p


def test_fetch_error_with_url():
    err = FetchError("boom", url="https://example.com/x.git")
    assert err.url == "https://example.com/x.git"
    assert str(err) == "boom"


def test_plugin_not_found_message():
    err = PluginNotFoundError("missing", "my-marketplace")
    assert err.name == "missing"
    assert err.marketplace == "my-marketplace"
    assert str(err) == "Plugin missing not found in marketplace my-marketplace"


def test_plugin_not_found_is_key_error():
    with pytest.raises(KeyError):
        raise PluginNotFoundError("x", "m")
