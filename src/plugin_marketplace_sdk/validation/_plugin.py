from __future__ import annotations

import re
from typing import Any

from ._marketplace import KEBAB_CASE
from ._result import ValidationResult

# MAJOR.MINOR.PATCH with optional -prerelease and +build
SEMVER = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$"
)


def validate_plugin(data: dict[str, Any]) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(data, dict):
        result.error("$", "Plugin manifest must be a JSON object")
        return result

    name = data.get("name")
    if name is None or (isinstance(name, str) and not name.strip()):
        result.error("name", "name: Required")
    elif not isinstance(name, str):
        result.error("name", "name: Expected a string")
    elif not KEBAB_CASE.match(name):
        result.warning("name", f'Plugin name "{name}" is not kebab-case')

    desc = data.get("description")
    if not isinstance(desc, str) or not desc.strip():
        result.warning("description", "No plugin description provided.")

    version = data.get("version")
    if version is not None and not (isinstance(version, str) and SEMVER.match(version)):
        result.warning("version", f"Version {version!r} is not a semantic version")

    author = data.get("author")
    if author is not None:
        if isinstance(author, dict):
            if not isinstance(author.get("name"), str):
                result.error("author.name", "author.name: Required")
        elif not isinstance(author, str):
            result.error("author", "author: Expected a string or an object with a name")

    keywords = data.get("keywords")
    if keywords is not None and not (
        isinstance(keywords, list) and all(isinstance(k, str) for k in keywords)
    ):
        result.error("keywords", "keywords: Expected a list of strings")

    return result
