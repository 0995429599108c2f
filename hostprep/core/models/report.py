"""
Run report — the three outcome buckets of one bootstrap run.

Built incrementally by the catalog runner in catalog order, then handed
to the report renderer. Not persisted beyond the log file.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hostprep.core.models.action import InstallOutcome


class DuplicateOutcomeError(ValueError):
    """Raised when a second outcome is recorded for the same app."""


@dataclass
class RunReport:
    """Ordered outcome buckets, keyed by outcome status."""

    manager: str = ""
    dry_run: bool = False
    already: list[InstallOutcome] = field(default_factory=list)
    newly: list[InstallOutcome] = field(default_factory=list)
    failed: list[InstallOutcome] = field(default_factory=list)

    def record(self, outcome: InstallOutcome) -> None:
        """Append an outcome to its bucket. Each app is recorded once."""
        if outcome.name in self.names():
            raise DuplicateOutcomeError(f"Outcome already recorded for '{outcome.name}'")
        bucket = {
            "already_installed": self.already,
            "newly_installed": self.newly,
            "failed": self.failed,
        }[outcome.status]
        bucket.append(outcome)

    def names(self) -> list[str]:
        return [o.name for o in self.already + self.newly + self.failed]

    def get(self, name: str) -> InstallOutcome | None:
        for outcome in self.already + self.newly + self.failed:
            if outcome.name == name:
                return outcome
        return None

    @property
    def total(self) -> int:
        return len(self.already) + len(self.newly) + len(self.failed)

    @property
    def status(self) -> str:
        if not self.failed:
            return "ok"
        if self.already or self.newly:
            return "partial"
        return "failed"

    def to_dict(self) -> dict:
        return {
            "manager": self.manager,
            "dry_run": self.dry_run,
            "status": self.status,
            "total": self.total,
            "already_installed": [o.name for o in self.already],
            "newly_installed": [o.to_dict() for o in self.newly],
            "failed": [o.to_dict() for o in self.failed],
        }
