"""
Install executor — the single place where install actions are run.

Runs one action to completion with stdout discarded and stderr captured
to an anonymous temporary file. The temp file lives only inside a
``with`` block, so it is released on every exit path, including
interrupts. Per-app failures never raise: they come back as outcomes.

Flow:
    action → (dry-run? echo) → run → exit status → outcome
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from collections.abc import Callable
from dataclasses import dataclass

from hostprep.core.models.action import InstallAction, InstallOutcome
from hostprep.core.observability.logging_config import PROGRESS_ATTR

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 1800

ProgressFn = Callable[[str], None]


@dataclass
class ExecResult:
    """Raw result of running one action."""

    ok: bool
    returncode: int = 0
    error_line: str = ""
    dry_run: bool = False


class InstallExecutor:
    """Run install actions and classify their outcome.

    Args:
        dry_run: Echo actions instead of running them.
        timeout: Seconds allowed per action.
        progress: Receives one human-readable line per progress event.
    """

    def __init__(
        self,
        dry_run: bool = False,
        timeout: int = DEFAULT_TIMEOUT,
        progress: ProgressFn | None = None,
    ):
        self.dry_run = dry_run
        self.timeout = timeout
        self._progress = progress

    def emit(self, line: str) -> None:
        """Report a progress line to the console callback and the log."""
        logger.info(line, extra={PROGRESS_ATTR: True})
        if self._progress is not None:
            self._progress(line)

    def run(self, action: InstallAction, ok_codes: tuple[int, ...] = (0,)) -> ExecResult:
        """Run one action; success means its exit status is in ``ok_codes``.

        On failure ``error_line`` holds the first line of stderr only.
        """
        if self.dry_run:
            self.emit(f"[dry-run] {action.display}")
            return ExecResult(ok=True, dry_run=True)

        env = os.environ.copy()
        env.update(action.env)
        logger.debug("Executing: %s", action.display)

        try:
            with tempfile.TemporaryFile(
                mode="w+",
                encoding="utf-8",
                errors="replace",
                prefix="hostprep-",
                suffix=".err",
            ) as err:
                result = subprocess.run(
                    action.argv,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=err,
                    env=env,
                    timeout=self.timeout,
                    check=False,
                )
                err.seek(0)
                first_line = err.readline().strip()
        except subprocess.TimeoutExpired:
            logger.warning("Timed out after %ss: %s", self.timeout, action.display)
            return ExecResult(ok=False, returncode=-1, error_line=f"Command timed out after {self.timeout}s")
        except OSError as e:
            logger.warning("Could not run %s: %s", action.argv[0], e)
            return ExecResult(ok=False, returncode=127, error_line=str(e))

        if result.returncode in ok_codes:
            return ExecResult(ok=True, returncode=result.returncode)

        return ExecResult(
            ok=False,
            returncode=result.returncode,
            error_line=first_line or f"exit status {result.returncode}",
        )

    def execute(self, label: str, action: InstallAction) -> InstallOutcome:
        """Install ``label`` by running ``action``.

        Returns a newly-installed outcome (tagged when dry-run) or a
        failed outcome carrying the first line of the error output.
        Composite pipelines succeed or fail as a whole; nothing already
        done by an earlier step is rolled back.
        """
        if not self.dry_run:
            self.emit(f"Installing {label}...")

        result = self.run(action)

        if result.dry_run:
            return InstallOutcome.newly(label, dry_run=True)

        if result.ok:
            self.emit(f"✓ Successfully installed {label}")
            return InstallOutcome.newly(label)

        self.emit(f"✗ Failed to install {label}")
        logger.debug("%s failed (exit %d): %s", label, result.returncode, result.error_line)
        return InstallOutcome.failure(label, result.error_line)
