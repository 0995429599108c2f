"""
Install use case — bootstrap the host's base apps.

This is the top-level orchestrator: it loads settings, runs the
pre-flight checks, refreshes the package index, installs the catalog
and the manual installs, and logs the summary. The full vertical slice
from user intent to a rendered report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from hostprep.adapters.registry import AdapterRegistry, default_registry
from hostprep.core.config.loader import ConfigError, load_settings
from hostprep.core.data.catalog import MANUAL_INSTALLS, build_catalog
from hostprep.core.engine.executor import InstallExecutor, ProgressFn
from hostprep.core.engine.report import log_report
from hostprep.core.engine.runner import CatalogRunner
from hostprep.core.models.app import AppSpec, ManualInstall
from hostprep.core.models.report import RunReport
from hostprep.core.models.settings import Settings
from hostprep.core.services.preflight import PreflightError, run_preflight

logger = logging.getLogger(__name__)


@dataclass
class InstallResult:
    """Result of a bootstrap run."""

    report: RunReport | None = None
    manager: str | None = None
    settings: Settings | None = None
    error: str | None = None

    @property
    def exit_code(self) -> int:
        """0 whenever the run completed, even with failed apps."""
        return 1 if self.error else 0

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        result: dict = {"manager": self.manager}
        if self.report:
            result["report"] = self.report.to_dict()
        return result


def run_install(
    config_path: Path | None = None,
    dry_run: bool = False,
    settings: Settings | None = None,
    registry: AdapterRegistry | None = None,
    catalog: list[AppSpec] | None = None,
    manual_installs: list[ManualInstall] | None = None,
    progress: ProgressFn | None = None,
) -> InstallResult:
    """Install the catalog on this host.

    Args:
        config_path: Optional explicit path to hostprep.yml.
        dry_run: Echo install commands instead of running them.
        settings: Pre-loaded settings (skips loading from disk).
        registry: Optional pre-configured adapter registry.
        catalog: Override the catalog (default: base apps + extra_apps).
        manual_installs: Override the manual installs.
        progress: Receives progress lines as they happen.

    Returns:
        InstallResult with the run report, or an error for fatal conditions.
    """
    result = InstallResult()

    # ── Load settings ────────────────────────────────────────────
    if settings is None:
        try:
            settings = load_settings(config_path)
        except ConfigError as e:
            result.error = str(e)
            return result
    result.settings = settings

    # ── Pre-flight ───────────────────────────────────────────────
    if registry is None:
        registry = default_registry()

    try:
        adapter = run_preflight(registry, settings, dry_run=dry_run)
    except PreflightError as e:
        logger.error("Pre-flight check failed: %s", e)
        result.error = str(e)
        return result
    result.manager = adapter.name

    # ── Install ──────────────────────────────────────────────────
    if manual_installs is None:
        manual_installs = MANUAL_INSTALLS
    if catalog is None:
        catalog = build_catalog(settings.extra_apps, manual_installs)

    executor = InstallExecutor(
        dry_run=dry_run,
        timeout=settings.install_timeout,
        progress=progress,
    )
    runner = CatalogRunner(adapter, executor)
    report = runner.run(catalog, manual_installs)
    result.report = report

    log_report(report)
    return result
