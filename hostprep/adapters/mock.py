"""
Mock adapter — test double for package manager operations.

Simulates a manager without touching the host: presence is answered
from a configurable installed set, and commands are plain ``true``
or ``false`` invocations unless overridden per package.
"""

from __future__ import annotations

import shlex

from hostprep.adapters.base import PackageManagerAdapter
from hostprep.core.models.action import InstallAction
from hostprep.core.models.package_manager import PackageManagerKind


class MockPackageManager(PackageManagerAdapter):
    """Configurable mock manager.

    By default nothing is installed and every install succeeds.
    """

    binary = "mock-pm"

    def __init__(
        self,
        kind: PackageManagerKind = PackageManagerKind.APT,
        installed: set[str] | None = None,
        available: bool = True,
    ):
        self.kind = kind
        self._installed = set(installed or ())
        self._available = available
        self._commands: dict[str, InstallAction] = {}
        self._refresh = InstallAction.command("true", label="refresh")
        self._checks: list[str] = []

    @property
    def checks(self) -> list[str]:
        """Names passed to presence_check, in call order."""
        return self._checks

    def is_available(self) -> bool:
        return self._available

    def presence_check(self, name: str, package: str | None = None) -> bool:
        self._checks.append(name)
        return name in self._installed or (package or name) in self._installed

    def _query_installed(self, package: str) -> bool:
        return package in self._installed

    def set_installed(self, *names: str) -> None:
        self._installed.update(names)

    def set_command(self, package: str, action: InstallAction) -> None:
        """Use a custom install action for ``package``."""
        self._commands[package] = action

    def set_failure(self, package: str, stderr: str = "E: mock failure", code: int = 1) -> None:
        """Make installing ``package`` exit non-zero with ``stderr``."""
        self._commands[package] = InstallAction.pipeline(
            f"printf '%s\\n' {shlex.quote(stderr)} >&2",
            f"exit {code}",
            label=package,
        )

    def set_refresh(self, action: InstallAction) -> None:
        self._refresh = action

    def install_command(self, package: str) -> InstallAction:
        return self._commands.get(package, InstallAction.command("true", label=package))

    def refresh_command(self) -> InstallAction:
        return self._refresh
