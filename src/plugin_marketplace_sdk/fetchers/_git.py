from __future__ import annotations

import logging
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import Settings
from ..errors import FetchError
from ..loaders.marketplace import load_marketplace

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..models.marketplace import MarketplaceManifest

logger = logging.getLogger(__name__)


def fetch_via_git(
    url: str, ref: str | None = None, settings: Settings | None = None
) -> MarketplaceManifest:
    """Clone a git repo and load its marketplace manifest."""
    with cloned(url, ref=ref, settings=settings) as repo:
        return load_marketplace(repo)


@contextmanager
def cloned(url: str, ref: str | None = None, settings: Settings | None = None) -> Iterator[Path]:
    """Shallow-clone url into a temporary directory that is removed on exit."""
    settings = settings or Settings.from_env()
    with tempfile.TemporaryDirectory(prefix="plugin-marketplace-") as tmpdir:
        dest = Path(tmpdir) / "repo"
        clone(url, dest, ref=ref, timeout=settings.git_timeout)
        yield dest


def github_url(repo: str) -> str:
    return f"https://github.com/{repo}.git"


def clone(url: str, dest: Path, ref: str | None = None, timeout: float = 120) -> None:
    cmd = ["git", "clone", "--depth", "1"]
    if ref:
        cmd += ["--branch", ref]
    cmd += [url, str(dest)]
    logger.debug("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise FetchError(f"git clone timed out for {url}", url=url) from e
    except FileNotFoundError as e:
        raise FetchError("git is not installed or not in PATH", url=url) from e
    if result.returncode != 0:
        raise FetchError(f"git clone failed for {url}: {result.stderr.strip()}", url=url)
