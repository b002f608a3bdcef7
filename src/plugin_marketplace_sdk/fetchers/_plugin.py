from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import FetchError
from ..loaders.plugin import load_plugin
from ..models.marketplace import LocalSource, UrlSource
from ._git import cloned

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .._plugin import Plugin
    from ..config import Settings
    from ..models.marketplace import PluginEntry

logger = logging.getLogger(__name__)


@contextmanager
def resolve_plugin_source(
    entry: PluginEntry,
    marketplace_root: Path,
    settings: Settings | None = None,
) -> Iterator[Path]:
    """Yield a local directory holding the plugin an entry points at.

    Local sources resolve under marketplace_root and must stay inside it.
    Url sources are cloned into a temporary directory removed on exit.
    """
    source = entry.source
    if isinstance(source, LocalSource):
        yield _local_dir(source.path, Path(marketplace_root))
    elif isinstance(source, UrlSource):
        with cloned(source.url, ref=source.ref, settings=settings) as repo:
            yield repo
    else:
        raise FetchError(f"Unsupported source type: {type(source)}")


def fetch_plugin(
    entry: PluginEntry,
    marketplace_root: Path,
    settings: Settings | None = None,
) -> Plugin:
    """Resolve an entry's source and load the plugin it points at."""
    with resolve_plugin_source(entry, marketplace_root, settings=settings) as path:
        return load_plugin(path)


def _local_dir(relative: str, root: Path) -> Path:
    if not relative.strip():
        raise FetchError("Local source path is empty", url=relative)
    base = root.resolve()
    target = (base / relative).resolve()
    if not target.is_relative_to(base):
        raise FetchError(f"Local source escapes the marketplace root: {relative}", url=relative)
    if not target.is_dir():
        raise FetchError(f"Not a directory: {target}", url=relative)
    logger.debug("Resolved local source %s to %s", relative, target)
    return target
