"""
Apt adapter — Debian, Ubuntu and derivatives.
"""

from __future__ import annotations

from hostprep.adapters.base import PackageManagerAdapter, _probe
from hostprep.core.models.action import InstallAction
from hostprep.core.models.package_manager import PackageManagerKind

_NONINTERACTIVE = {"DEBIAN_FRONTEND": "noninteractive"}


class AptAdapter(PackageManagerAdapter):
    kind = PackageManagerKind.APT
    binary = "apt-get"

    def _query_installed(self, package: str) -> bool:
        r = _probe(["dpkg-query", "-W", "-f=${Status}", package])
        return "install ok installed" in r.stdout

    def install_command(self, package: str) -> InstallAction:
        return InstallAction.command(
            "apt-get", "install", "-y", package,
            env=_NONINTERACTIVE, label=package,
        )

    def refresh_command(self) -> InstallAction:
        return InstallAction.command("apt-get", "update", label="apt-get update")
