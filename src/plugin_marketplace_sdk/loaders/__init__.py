from .marketplace import load_marketplace, marketplace_root
from .plugin import load_agent, load_command, load_plugin, load_plugin_manifest, load_skill

__all__ = [
    "load_agent",
    "load_command",
    "load_marketplace",
    "load_plugin",
    "load_plugin_manifest",
    "load_skill",
    "marketplace_root",
]
