from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import FetchError
from ..loaders.marketplace import load_marketplace, marketplace_root
from ..models.marketplace import HttpSource, MarketplaceManifest, UrlSource
from ._git import cloned, fetch_via_git, github_url
from ._http import fetch_via_http

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..config import Settings

logger = logging.getLogger(__name__)

# Matches "owner/repo" or "owner/repo-name" GitHub shorthand
_GITHUB_SHORTHAND = re.compile(r"^[\w.-]+/[\w.-]+$")
# user@host:path
_SCP_STYLE = re.compile(r"^[\w.-]+@[\w.-]+:\S+$")


def fetch_marketplace(
    source: str | Path | UrlSource | HttpSource,
    settings: Settings | None = None,
) -> MarketplaceManifest:
    """Load a marketplace manifest from a local path or a remote source.

    Args:
        source: Where to read from. If a string, auto-detected:
            - an existing file or directory → read from disk
            - ends with ".git" or "user@host:path" → clone that repository
            - "owner/repo" → clone from github.com
            - otherwise → HTTP GET to the URL (marketplace.json).
            Or pass a Path, UrlSource, or HttpSource explicitly.
        settings: Timeouts; defaults to Settings.from_env().

    Returns:
        Parsed marketplace manifest.

    Raises:
        LoadError: If a local manifest is missing or not valid JSON.
        FetchError: On network failure, clone failure, or invalid response.
    """
    if isinstance(source, Path):
        return load_marketplace(source)
    if isinstance(source, str):
        if Path(source).exists():
            return load_marketplace(Path(source))
        source = detect_source(source)

    logger.debug("Fetching marketplace from %s", source.url)
    if isinstance(source, UrlSource):
        return fetch_via_git(source.url, ref=source.ref, settings=settings)
    if isinstance(source, HttpSource):
        return fetch_via_http(source.url, settings=settings)

    raise FetchError(f"Unsupported source type: {type(source)}")


def detect_source(s: str) -> UrlSource | HttpSource:
    if s.endswith(".git") or _SCP_STYLE.match(s):
        return UrlSource(source="url", url=s)
    if _GITHUB_SHORTHAND.match(s):
        return UrlSource(source="url", url=github_url(s))
    return HttpSource(source="http", url=s)


@contextmanager
def open_marketplace(
    source: str | Path, settings: Settings | None = None
) -> Iterator[tuple[MarketplaceManifest, Path | None]]:
    """Yield a manifest together with the root its local sources resolve against.

    Local paths and git sources have a root; a marketplace.json fetched over
    HTTP does not, so the root is None. Git clones are removed on exit.
    """
    if isinstance(source, Path) or Path(source).exists():
        yield load_marketplace(Path(source)), marketplace_root(Path(source))
        return
    detected = detect_source(source)
    if isinstance(detected, UrlSource):
        with cloned(detected.url, ref=detected.ref, settings=settings) as repo:
            yield load_marketplace(repo), marketplace_root(repo)
        return
    yield fetch_via_http(detected.url, settings=settings), None
