"""
Pre-flight checks — fatal conditions evaluated before any install.

Three checks, in order:
    1. a supported package manager is present
    2. the process runs as root (skipped on dry runs)
    3. the network is reachable (skipped on dry runs)

Each failure raises PreflightError. Nothing has been installed or
changed on the host when one is raised.
"""

from __future__ import annotations

import logging
import os
import shutil
import socket
import subprocess

from hostprep.adapters.base import PackageManagerAdapter
from hostprep.adapters.registry import AdapterRegistry
from hostprep.core.models.settings import Settings

logger = logging.getLogger(__name__)


class PreflightError(Exception):
    """Raised when the run cannot start."""


def detect_manager(registry: AdapterRegistry) -> PackageManagerAdapter:
    """Return the host's package manager adapter.

    Raises:
        PreflightError: If no supported manager is installed.
    """
    adapter = registry.detect()
    if adapter is None:
        raise PreflightError(
            "Unsupported system: no supported package manager found "
            f"(looked for {', '.join(registry.list_adapters())})"
        )
    return adapter


def is_root() -> bool:
    return os.geteuid() == 0


def check_privileges() -> None:
    """Raises PreflightError unless running as root."""
    if not is_root():
        raise PreflightError("This command must be run as root (try sudo)")


def _ping(host: str, timeout: int) -> bool:
    try:
        r = subprocess.run(
            ["ping", "-c", "1", "-W", str(timeout), host],
            capture_output=True,
            timeout=timeout + 1,
            check=False,
        )
    except (subprocess.TimeoutExpired, OSError) as exc:
        logger.debug("Ping to %s failed: %s", host, exc)
        return False
    return r.returncode == 0


def _tcp_probe(host: str, timeout: int, port: int = 443) -> bool:
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return True
    except OSError as exc:
        logger.debug("TCP probe to %s:%d failed: %s", host, port, exc)
        return False


def check_network(hosts: list[str], timeout: int = 5) -> bool:
    """Whether any of ``hosts`` is reachable.

    Uses ICMP ping when ``ping`` is installed, otherwise a TCP connect
    to port 443.
    """
    use_ping = shutil.which("ping") is not None
    for host in hosts:
        reachable = _ping(host, timeout) if use_ping else _tcp_probe(host, timeout)
        if reachable:
            logger.info("Network connectivity confirmed via %s", host)
            return True
    logger.error("Network check failed: could not reach any of %s", ", ".join(hosts))
    return False


def run_preflight(
    registry: AdapterRegistry,
    settings: Settings,
    dry_run: bool = False,
) -> PackageManagerAdapter:
    """Run every pre-flight check and return the detected adapter.

    Raises:
        PreflightError: On the first fatal condition.
    """
    adapter = detect_manager(registry)

    if dry_run:
        logger.info("Dry run: skipping privilege and network checks")
        return adapter

    check_privileges()

    if not check_network(settings.probe_hosts, settings.probe_timeout):
        raise PreflightError("No network connectivity; cannot download packages")

    return adapter
