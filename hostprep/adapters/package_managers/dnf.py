"""
Dnf adapter — Fedora, RHEL and derivatives.
"""

from __future__ import annotations

from hostprep.adapters.base import PackageManagerAdapter, _probe
from hostprep.core.models.action import InstallAction
from hostprep.core.models.package_manager import PackageManagerKind


class DnfAdapter(PackageManagerAdapter):
    """Dnf adapter.

    ``dnf check-update`` exits 100 when updates are pending; that is a
    successful refresh, not an error.
    """

    kind = PackageManagerKind.DNF
    binary = "dnf"
    refresh_ok_codes = (0, 100)

    def _query_installed(self, package: str) -> bool:
        return _probe(["rpm", "-q", package]).returncode == 0

    def install_command(self, package: str) -> InstallAction:
        return InstallAction.command("dnf", "install", "-y", package, label=package)

    def refresh_command(self) -> InstallAction:
        return InstallAction.command("dnf", "check-update", label="dnf check-update")
