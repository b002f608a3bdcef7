from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Level = Literal["error", "warning"]


@dataclass
class ValidationIssue:
    """A single validation finding (error or warning)."""

    level: Level
    path: str  # JSON path (plugins[0].source.url) or file-relative locator
    message: str

    def __str__(self) -> str:
        return f"{self.level}: {self.path}: {self.message}"


@dataclass
class ValidationResult:
    """Result of validating a marketplace, plugin manifest, or plugin directory.

    Attributes:
        issues: All errors and warnings in the order found. Use .errors and
            .warnings for filtered views.
        valid: True if there are no errors (warnings are allowed).
    """

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not any(i.level == "error" for i in self.issues)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "warning"]

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "error"]

    def error(self, path: str, message: str) -> None:
        self.issues.append(ValidationIssue("error", path, message))

    def warning(self, path: str, message: str) -> None:
        self.issues.append(ValidationIssue("warning", path, message))

    def extend(self, other: ValidationResult, prefix: str = "") -> None:
        """Append another result's issues, optionally prefixing their paths."""
        for issue in other.issues:
            path = f"{prefix}:{issue.path}" if prefix else issue.path
            self.issues.append(ValidationIssue(issue.level, path, issue.message))
