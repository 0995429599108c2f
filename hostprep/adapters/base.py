"""
Adapter base — the contract between the catalog runner and a package manager.

The runner only talks to package managers through this interface: a
read-only presence check, plus pure construction of install and
refresh actions. Nothing here executes an install.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod

from hostprep.core.models.action import InstallAction
from hostprep.core.models.package_manager import PackageManagerKind

logger = logging.getLogger(__name__)

# Seconds allowed for a single installed-package query.
PROBE_TIMEOUT = 10


class PackageManagerAdapter(ABC):
    """Abstract base class for package manager adapters.

    To add a manager:
        1. Subclass PackageManagerAdapter
        2. Set kind and binary, implement the query and command builders
        3. Register it in ``default_registry()``
    """

    kind: PackageManagerKind
    binary: str

    # Refresh exit codes that count as success.
    refresh_ok_codes: tuple[int, ...] = (0,)

    @property
    def name(self) -> str:
        return self.kind.value

    def is_available(self) -> bool:
        """Whether this manager's binary is on PATH."""
        return shutil.which(self.binary) is not None

    def presence_check(self, name: str, package: str | None = None) -> bool:
        """Check whether an app is already usable on this host.

        An executable called ``name`` on PATH wins immediately. Otherwise
        the manager's installed-package metadata is queried for
        ``package`` (defaults to ``name``). Only explicit evidence counts;
        a failed or ambiguous query means "not installed".
        """
        if shutil.which(name) is not None:
            logger.debug("%s found on PATH", name)
            return True
        return self.is_package_installed(package or name)

    def is_package_installed(self, package: str) -> bool:
        """Query installed-package metadata. Never raises."""
        try:
            return self._query_installed(package)
        except FileNotFoundError:
            logger.warning("Package query tool not found for pm=%s (checking %s)", self.name, package)
        except subprocess.TimeoutExpired:
            logger.warning("Timeout checking package %s with pm=%s", package, self.name)
        except OSError as exc:
            logger.warning("OS error checking package %s with pm=%s: %s", package, self.name, exc)
        return False

    @abstractmethod
    def _query_installed(self, package: str) -> bool:
        """Run the manager-specific installed-package query."""

    @abstractmethod
    def install_command(self, package: str) -> InstallAction:
        """Non-interactive install action for ``package``."""

    @abstractmethod
    def refresh_command(self) -> InstallAction:
        """Package index refresh action."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


def _probe(cmd: list[str]) -> subprocess.CompletedProcess:
    """Run a read-only query command with output captured."""
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        timeout=PROBE_TIMEOUT,
        check=False,
    )
