from __future__ import annotations

import re
from pathlib import PurePosixPath, PureWindowsPath
from typing import Any

from ._result import ValidationResult

RESERVED_MARKETPLACE_NAMES = frozenset(
    {
        "claude-code-marketplace",
        "claude-code-plugins",
        "claude-plugins-official",
        "anthropic-marketplace",
        "anthropic-plugins",
        "agent-skills",
        "life-sciences",
    }
)

SOURCE_KINDS = ("url", "local")

KEBAB_CASE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

_GIT_URL_PREFIXES = ("https://", "http://", "git://", "ssh://", "file://")
# user@host:owner/repo.git
_SCP_STYLE = re.compile(r"^[\w.-]+@[\w.-]+:\S+$")


def validate_marketplace(data: dict[str, Any]) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(data, dict):
        result.error("$", "Marketplace manifest must be a JSON object")
        return result

    _check_name(data, result)

    if data.get("owner") is None:
        result.warning("owner", "No marketplace owner provided.")

    if not _marketplace_description(data):
        result.warning("description", "No marketplace description provided.")

    plugins = data.get("plugins")
    if plugins is None:
        result.error("plugins", "plugins: Required")
    elif not isinstance(plugins, list):
        result.error("plugins", "plugins: Expected a list of plugin entries")
    elif not plugins:
        result.warning("plugins", "Marketplace has no plugins defined")
    else:
        _check_plugins(plugins, result)

    return result


def is_git_url(url: str) -> bool:
    return url.startswith(_GIT_URL_PREFIXES) or bool(_SCP_STYLE.match(url))


def is_safe_relative_path(path: str) -> bool:
    """True if path is relative and never climbs out of its base directory."""
    if PurePosixPath(path).is_absolute() or PureWindowsPath(path).is_absolute():
        return False
    return ".." not in PurePosixPath(path.replace("\\", "/")).parts


def _check_name(data: dict[str, Any], result: ValidationResult) -> None:
    name = data.get("name")
    if name is None:
        result.error("name", "name: Required")
    elif not isinstance(name, str) or not name.strip():
        result.error("name", "name: Expected a non-empty string")
    elif name.strip().lower() in RESERVED_MARKETPLACE_NAMES:
        result.error("name", f'Marketplace name "{name}" is reserved')
    elif not KEBAB_CASE.match(name):
        result.warning("name", f'Marketplace name "{name}" is not kebab-case')


def _marketplace_description(data: dict[str, Any]) -> str | None:
    desc = data.get("description")
    metadata = data.get("metadata")
    if not desc and isinstance(metadata, dict):
        desc = metadata.get("description")
    if isinstance(desc, str) and desc.strip():
        return desc
    return None


def _check_plugins(plugins: list[Any], result: ValidationResult) -> None:
    seen_names: set[str] = set()
    objects = 0
    enabled = 0
    for i, entry in enumerate(plugins):
        prefix = f"plugins[{i}]"
        if not isinstance(entry, dict):
            result.error(prefix, f"{prefix}: Expected an object")
            continue
        objects += 1

        name = entry.get("name")
        if name is None:
            result.error(f"{prefix}.name", "name: Required")
        elif not isinstance(name, str) or not name.strip():
            result.error(f"{prefix}.name", "name: Expected a non-empty string")
        else:
            if name in seen_names:
                result.error(
                    f"{prefix}.name", f'Duplicate plugin name "{name}" found in marketplace'
                )
            seen_names.add(name)
            if not KEBAB_CASE.match(name):
                result.warning(f"{prefix}.name", f'Plugin name "{name}" is not kebab-case')

        label = name if isinstance(name, str) and name else prefix

        desc = entry.get("description")
        if not isinstance(desc, str) or not desc.strip():
            result.warning(f"{prefix}.description", f'Plugin "{label}" has no description')

        if "source" not in entry or entry["source"] is None:
            result.error(f"{prefix}.source", "source: Required")
        else:
            _check_source(entry["source"], f"{prefix}.source", label, result)

        homepage = entry.get("homepage")
        if homepage is not None and not (
            isinstance(homepage, str) and homepage.startswith(("https://", "http://"))
        ):
            result.warning(f"{prefix}.homepage", f'Plugin "{label}" homepage is not an http(s) URL')

        disabled = entry.get("disabled", False)
        if not isinstance(disabled, bool):
            result.error(f"{prefix}.disabled", "disabled: Expected a boolean")
        elif not disabled:
            enabled += 1

    if objects and enabled == 0:
        result.warning("plugins", "All plugins in the marketplace are disabled")


def _check_source(src: Any, path: str, label: str, result: ValidationResult) -> None:
    if isinstance(src, str):
        # bare string is a local path
        if not src.strip():
            result.error(path, "source: Expected a non-empty path")
        else:
            _check_local_path(src, path, result)
        return
    if not isinstance(src, dict):
        result.error(path, "source: Expected a path string or a source object")
        return

    kind = src.get("source")
    if kind not in SOURCE_KINDS:
        result.error(
            f"{path}.source",
            f'Plugin "{label}" has unknown source type {kind!r} (expected "url" or "local")',
        )
        return

    if kind == "local":
        local_path = src.get("path")
        if not isinstance(local_path, str) or not local_path.strip():
            result.error(f"{path}.path", "path: Required")
        else:
            _check_local_path(local_path, f"{path}.path", result)
        return

    url = src.get("url")
    if not isinstance(url, str) or not url.strip():
        result.error(f"{path}.url", "url: Required")
    elif not is_git_url(url):
        result.error(f"{path}.url", f'Plugin "{label}" url is not a git URL: {url}')
    elif url.startswith("http://"):
        result.warning(f"{path}.url", f'Plugin "{label}" url uses insecure http://')

    ref = src.get("ref")
    if ref is not None and not isinstance(ref, str):
        result.error(f"{path}.ref", "ref: Expected a string")


def _check_local_path(local_path: str, path: str, result: ValidationResult) -> None:
    if not is_safe_relative_path(local_path):
        result.error(path, f"{path}: Path traversal not allowed: {local_path}")
