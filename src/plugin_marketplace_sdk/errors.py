from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class LoadError(Exception):
    """Raised when reading a marketplace, plugin, or markdown document from disk fails.

    Attributes:
        path: The file or directory that could not be loaded, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class FetchError(Exception):
    """Raised when resolving a remote or local source fails (git, HTTP, missing path).

    Attributes:
        url: The URL or path that failed, if applicable.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)


class PluginNotFoundError(KeyError):
    """Raised when a plugin name is not listed in a marketplace manifest."""

    def __init__(self, name: str, marketplace: str) -> None:
        self.name = name
        self.marketplace = marketplace
        super().__init__(name)

    def __str__(self) -> str:
        return f"Plugin {self.name} not found in marketplace {self.marketplace}"
