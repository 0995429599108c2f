"""
Pacman adapter — Arch Linux and derivatives.
"""

from __future__ import annotations

from hostprep.adapters.base import PackageManagerAdapter, _probe
from hostprep.core.models.action import InstallAction
from hostprep.core.models.package_manager import PackageManagerKind


class PacmanAdapter(PackageManagerAdapter):
    kind = PackageManagerKind.PACMAN
    binary = "pacman"

    def _query_installed(self, package: str) -> bool:
        return _probe(["pacman", "-Qi", package]).returncode == 0

    def install_command(self, package: str) -> InstallAction:
        return InstallAction.command(
            "pacman", "-S", "--noconfirm", "--needed", package, label=package,
        )

    def refresh_command(self) -> InstallAction:
        return InstallAction.command("pacman", "-Sy", label="pacman -Sy")
