"""Validation entry points that read manifests and plugin trees from disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import frontmatter  # type: ignore[import-untyped]

from ..errors import LoadError
from ..loaders.marketplace import marketplace_root, resolve_marketplace_file
from ..loaders.plugin import PLUGIN_FILE, command_files, skill_files
from ._marketplace import is_safe_relative_path, validate_marketplace
from ._plugin import validate_plugin
from ._result import ValidationResult

logger = logging.getLogger(__name__)

MANIFEST_PATH = f".claude-plugin/{PLUGIN_FILE}"


def validate_marketplace_file(path: Path) -> ValidationResult:
    data, result = _read_json(Path(path))
    if data is None:
        return result
    return validate_marketplace(data)


def validate_plugin_file(path: Path) -> ValidationResult:
    data, result = _read_json(Path(path))
    if data is None:
        return result
    return validate_plugin(data)


def validate_plugin_dir(path: Path) -> ValidationResult:
    root = Path(path)
    result = ValidationResult()
    if not root.is_dir():
        result.error("$", f"Plugin path is not a directory: {root}")
        return result

    manifest = root / MANIFEST_PATH
    if manifest.is_file():
        result.extend(validate_plugin_file(manifest), prefix=MANIFEST_PATH)
    else:
        result.warning(MANIFEST_PATH, "No plugin.json found; the directory name will be used")

    for skill_md in skill_files(root):
        _check_markdown(root, skill_md, "Skill", result)
    for command_md in command_files(root):
        _check_markdown(root, command_md, "Command", result)
    return result


def validate_marketplace_dir(path: Path) -> ValidationResult:
    """Validate marketplace.json and check that every local source exists on disk."""
    path = Path(path)
    try:
        manifest_file = resolve_marketplace_file(path)
    except LoadError as e:
        result = ValidationResult()
        result.error("$", str(e))
        return result

    data, result = _read_json(manifest_file)
    if data is None:
        return result
    result = validate_marketplace(data)

    plugins = data.get("plugins") if isinstance(data, dict) else None
    if not isinstance(plugins, list):
        return result

    root = marketplace_root(manifest_file)
    for i, entry in enumerate(plugins):
        if not isinstance(entry, dict):
            continue
        local_path = _local_path(entry.get("source"))
        if not local_path or not local_path.strip() or not is_safe_relative_path(local_path):
            continue
        _check_local_target(root, local_path, entry.get("name"), f"plugins[{i}].source", result)
    return result


# --- internal helpers ---


def _read_json(path: Path) -> tuple[Any, ValidationResult]:
    result = ValidationResult()
    try:
        return json.loads(path.read_text(encoding="utf-8")), result
    except FileNotFoundError:
        result.error("$", f"File not found: {path}")
    except json.JSONDecodeError as e:
        result.error("$", f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}")
    except (OSError, UnicodeDecodeError) as e:
        result.error("$", f"Cannot read {path}: {e}")
    return None, result


def _local_path(src: Any) -> str | None:
    if isinstance(src, str):
        return src
    if isinstance(src, dict) and src.get("source") == "local":
        p = src.get("path")
        return p if isinstance(p, str) else None
    return None


def _check_local_target(
    root: Path, local_path: str, entry_name: Any, issue_path: str, result: ValidationResult
) -> None:
    target = root / local_path
    if not target.is_dir():
        result.error(issue_path, f"Local source does not exist or is not a directory: {local_path}")
        return
    manifest = target / MANIFEST_PATH
    if not manifest.is_file():
        return
    data, read_result = _read_json(manifest)
    if data is None:
        result.extend(read_result, prefix=f"{local_path}/{MANIFEST_PATH}")
        return
    plugin_name = data.get("name") if isinstance(data, dict) else None
    if isinstance(entry_name, str) and isinstance(plugin_name, str) and plugin_name != entry_name:
        result.warning(
            issue_path,
            f'Marketplace entry "{entry_name}" points at plugin named "{plugin_name}"',
        )


def _check_markdown(root: Path, md: Path, kind: str, result: ValidationResult) -> None:
    rel = md.relative_to(root).as_posix()
    logger.debug("Checking %s frontmatter in %s", kind.lower(), md)
    try:
        post = frontmatter.load(str(md))
    except Exception as e:
        result.error(rel, f"{kind} frontmatter could not be parsed: {e}")
        return
    desc = post.metadata.get("description")
    if not isinstance(desc, str) or not desc.strip():
        result.warning(f"{rel}:description", f"{kind} has no description")
    if not post.content.strip():
        result.warning(rel, f"{kind} has an empty body")
