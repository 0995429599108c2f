"""
InstallAction and InstallOutcome models — the execution contract.

Actions describe one installation unit. Outcomes describe what happened
to one app. The executor turns actions into outcomes and never raises:
every per-app failure is captured in the outcome.
"""

from __future__ import annotations

import shlex
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

OutcomeStatus = Literal["already_installed", "newly_installed", "failed"]


class InstallAction(BaseModel):
    """A single executable invocation.

    Composite shell pipelines are still one action: ``pipeline()`` wraps
    the steps in ``sh -c`` joined by ``&&`` so any failing step fails
    the whole unit.
    """

    model_config = ConfigDict(frozen=True)

    argv: list[str]
    env: dict[str, str] = Field(default_factory=dict)
    label: str = ""

    @classmethod
    def command(cls, *argv: str, env: dict[str, str] | None = None, label: str = "") -> InstallAction:
        """Create a plain command action."""
        return cls(argv=list(argv), env=env or {}, label=label)

    @classmethod
    def pipeline(cls, *steps: str, label: str = "") -> InstallAction:
        """Create a composite action from shell steps."""
        return cls(argv=["sh", "-c", " && ".join(steps)], label=label)

    @property
    def is_pipeline(self) -> bool:
        return len(self.argv) == 3 and self.argv[:2] == ["sh", "-c"]

    @property
    def shell_text(self) -> str:
        """The action as a shell snippet, for embedding in a pipeline."""
        if self.is_pipeline:
            return self.argv[2]
        prefix = " ".join(f"{k}={shlex.quote(v)}" for k, v in self.env.items())
        cmd = shlex.join(self.argv)
        return f"{prefix} {cmd}" if prefix else cmd

    @property
    def display(self) -> str:
        """Human-readable form for dry-run echo and logs."""
        return self.shell_text


class InstallOutcome(BaseModel):
    """Terminal classification of one app for this run.

    Dry-run results are ``newly_installed`` with ``dry_run=True``;
    they are tagged in the report but counted as successes.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    status: OutcomeStatus
    reason: str | None = None
    dry_run: bool = False

    @property
    def ok(self) -> bool:
        return self.status != "failed"

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @classmethod
    def already(cls, name: str) -> InstallOutcome:
        return cls(name=name, status="already_installed")

    @classmethod
    def newly(cls, name: str, dry_run: bool = False) -> InstallOutcome:
        return cls(name=name, status="newly_installed", dry_run=dry_run)

    @classmethod
    def failure(cls, name: str, reason: str) -> InstallOutcome:
        return cls(name=name, status="failed", reason=reason)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
