from __future__ import annotations

import json
import logging
from pathlib import Path

from ..errors import LoadError
from ..models.marketplace import MarketplaceManifest

logger = logging.getLogger(__name__)

MANIFEST_DIR = ".claude-plugin"
MARKETPLACE_FILE = "marketplace.json"


def load_marketplace(path: Path) -> MarketplaceManifest:
    """Load and parse a marketplace manifest.

    Accepts either:
    - a path directly to a marketplace.json file
    - a directory containing .claude-plugin/marketplace.json
    - a directory containing marketplace.json
    """
    resolved = resolve_marketplace_file(Path(path))
    logger.debug("Loading marketplace manifest from %s", resolved)
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise LoadError(f"Marketplace file not found: {resolved}", path=resolved) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {resolved}: {e}", path=resolved) from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read {resolved}: {e}", path=resolved) from e
    return MarketplaceManifest.model_validate(data)


def marketplace_root(path: Path) -> Path:
    """Directory that local plugin sources are resolved against."""
    manifest_file = resolve_marketplace_file(Path(path)).resolve()
    parent = manifest_file.parent
    if parent.name == MANIFEST_DIR:
        return parent.parent
    return parent


def resolve_marketplace_file(path: Path) -> Path:
    if path.is_file():
        return path
    for candidate in (path / MANIFEST_DIR / MARKETPLACE_FILE, path / MARKETPLACE_FILE):
        if candidate.is_file():
            return candidate
    raise LoadError(
        f"No marketplace.json found at {path} or {path / MANIFEST_DIR / MARKETPLACE_FILE}",
        path=path,
    )
