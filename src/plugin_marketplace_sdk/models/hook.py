from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class HookAction(BaseModel):
    """One thing to run when a hook fires."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    type: Literal["command", "prompt", "agent"]
    command: str | None = None
    prompt: str | None = None
    agent: str | None = None
    timeout: int | None = None


class HookMatcher(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    matcher: str | None = None  # tool-name pattern; None matches everything
    hooks: list[HookAction]


class HooksConfig(BaseModel):
    """Contents of hooks/hooks.json, keyed by event name (PreToolUse, SessionStart, ...)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    description: str | None = None
    hooks: dict[str, list[HookMatcher]] = {}

    @property
    def events(self) -> list[str]:
        return sorted(self.hooks)
