from __future__ import annotations

import logging

import httpx

from ..config import Settings
from ..errors import FetchError
from ..models.marketplace import MarketplaceManifest

logger = logging.getLogger(__name__)


def fetch_via_http(url: str, settings: Settings | None = None) -> MarketplaceManifest:
    """Fetch and parse a marketplace.json from a direct HTTP(S) URL."""
    settings = settings or Settings.from_env()
    logger.debug("GET %s", url)
    try:
        response = httpx.get(url, follow_redirects=True, timeout=settings.http_timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(f"HTTP {e.response.status_code} fetching {url}", url=url) from e
    except httpx.HTTPError as e:
        raise FetchError(f"Network error fetching {url}: {e}", url=url) from e

    try:
        data = response.json()
    except ValueError as e:
        raise FetchError(f"Invalid JSON at {url}: {e}", url=url) from e

    return MarketplaceManifest.model_validate(data)
