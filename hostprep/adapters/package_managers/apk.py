"""
Apk adapter — Alpine Linux.
"""

from __future__ import annotations

from hostprep.adapters.base import PackageManagerAdapter, _probe
from hostprep.core.models.action import InstallAction
from hostprep.core.models.package_manager import PackageManagerKind


class ApkAdapter(PackageManagerAdapter):
    kind = PackageManagerKind.APK
    binary = "apk"

    def _query_installed(self, package: str) -> bool:
        return _probe(["apk", "info", "-e", package]).returncode == 0

    def install_command(self, package: str) -> InstallAction:
        return InstallAction.command("apk", "add", package, label=package)

    def refresh_command(self) -> InstallAction:
        return InstallAction.command("apk", "update", label="apk update")
