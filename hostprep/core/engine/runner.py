"""
Catalog runner — the central install loop.

Walks the catalog, then the manual installs, and produces exactly one
outcome per app:

    Unchecked ──present──▶ AlreadyInstalled
        │
        └──missing──▶ InstallAttempted ──exit 0──▶ NewlyInstalled
                                       └──else───▶ Failed

Nothing here aborts the run. Fatal conditions are checked before the
runner is ever constructed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from hostprep.adapters.base import PackageManagerAdapter
from hostprep.core.engine.executor import InstallExecutor
from hostprep.core.models.action import InstallAction, InstallOutcome
from hostprep.core.models.app import AppSpec, ManualInstall
from hostprep.core.models.report import RunReport

logger = logging.getLogger(__name__)


class CatalogRunner:
    """Install a catalog through one package manager adapter."""

    def __init__(self, adapter: PackageManagerAdapter, executor: InstallExecutor):
        self.adapter = adapter
        self.executor = executor

    def refresh(self) -> bool:
        """Refresh the package index. Best-effort: failures only warn."""
        self.executor.emit("Updating package lists...")
        result = self.executor.run(
            self.adapter.refresh_command(),
            ok_codes=self.adapter.refresh_ok_codes,
        )
        if not result.ok:
            logger.warning(
                "Package index refresh failed for %s (exit %d): %s; continuing",
                self.adapter.name, result.returncode, result.error_line,
            )
        return result.ok

    def _check_then_install(self, name: str, executable: str, package: str | None,
                            build: InstallAction | None) -> InstallOutcome:
        if self.adapter.presence_check(executable, package):
            self.executor.emit(f"✓ {name} is already installed")
            return InstallOutcome.already(name)
        if build is None:
            self.executor.emit(f"✗ {name} has no package for {self.adapter.name}")
            return InstallOutcome.failure(name, f"no package available for {self.adapter.name}")
        return self.executor.execute(name, build)

    def install_app(self, app: AppSpec) -> InstallOutcome:
        """Check-then-install one catalog entry."""
        package = app.package_for(self.adapter.kind)
        action = self.adapter.install_command(package) if package else None
        executable = app.executable_for(self.adapter.kind)
        return self._check_then_install(app.name, executable, package, action)

    def install_manual(self, manual: ManualInstall) -> InstallOutcome | None:
        """Check-then-install one bespoke install.

        Returns None, and records nothing, when the install doesn't
        apply to this package manager.
        """
        action = manual.resolve(self.adapter)
        if action is None:
            logger.info("Skipping %s: not applicable to %s", manual.name, self.adapter.name)
            return None
        self.executor.emit(f"Checking {manual.name} installation...")
        return self._check_then_install(manual.name, manual.executable, manual.name, action)

    def run(
        self,
        catalog: Iterable[AppSpec],
        manual_installs: Iterable[ManualInstall] = (),
        refresh: bool = True,
    ) -> RunReport:
        """Process the whole catalog and return the filled report."""
        report = RunReport(manager=self.adapter.name, dry_run=self.executor.dry_run)

        if refresh:
            self.refresh()

        for app in catalog:
            report.record(self.install_app(app))

        for manual in manual_installs:
            if manual.name in report.names():
                logger.warning(
                    "Skipping manual install %s: already handled by the catalog", manual.name,
                )
                continue
            outcome = self.install_manual(manual)
            if outcome is not None:
                report.record(outcome)

        logger.info(
            "Run finished on %s: %d already, %d new, %d failed",
            self.adapter.name, len(report.already), len(report.newly), len(report.failed),
        )
        return report
