from ._dispatcher import detect_source, fetch_marketplace, open_marketplace
from ._plugin import fetch_plugin, resolve_plugin_source

__all__ = [
    "detect_source",
    "fetch_marketplace",
    "fetch_plugin",
    "open_marketplace",
    "resolve_plugin_source",
]
