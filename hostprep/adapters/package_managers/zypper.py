"""
Zypper adapter — openSUSE and SLES.
"""

from __future__ import annotations

from hostprep.adapters.base import PackageManagerAdapter, _probe
from hostprep.core.models.action import InstallAction
from hostprep.core.models.package_manager import PackageManagerKind


class ZypperAdapter(PackageManagerAdapter):
    kind = PackageManagerKind.ZYPPER
    binary = "zypper"

    def _query_installed(self, package: str) -> bool:
        # Exits 104 when nothing matches.
        r = _probe([
            "zypper", "--non-interactive", "--quiet",
            "search", "--installed-only", "--match-exact", package,
        ])
        return r.returncode == 0

    def install_command(self, package: str) -> InstallAction:
        return InstallAction.command(
            "zypper", "--non-interactive", "install", package, label=package,
        )

    def refresh_command(self) -> InstallAction:
        return InstallAction.command(
            "zypper", "--non-interactive", "refresh", label="zypper refresh",
        )
