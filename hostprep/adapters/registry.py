"""
Adapter registry — package manager lookup and detection.

The registry is the single point of adapter management. Detection walks
the registered adapters in registration order and returns the first one
whose binary is present, so registration order is the priority order.
"""

from __future__ import annotations

import logging
from typing import Any

from hostprep.adapters.base import PackageManagerAdapter
from hostprep.core.models.package_manager import PackageManagerKind

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Central registry of package manager adapters.

    Features:
        - Register/unregister adapters by kind
        - Detect the host's manager in priority order
        - Query adapter availability
    """

    def __init__(self) -> None:
        self._adapters: dict[PackageManagerKind, PackageManagerAdapter] = {}

    def register(self, adapter: PackageManagerAdapter) -> None:
        """Register an adapter. Later registrations have lower priority."""
        if adapter.kind in self._adapters:
            logger.warning("Overwriting existing adapter: %s", adapter.name)
        self._adapters[adapter.kind] = adapter
        logger.debug("Registered adapter: %s", adapter.name)

    def unregister(self, kind: PackageManagerKind) -> None:
        """Remove an adapter from the registry."""
        self._adapters.pop(kind, None)

    def get(self, kind: PackageManagerKind | str) -> PackageManagerAdapter | None:
        """Look up an adapter by kind or kind name."""
        try:
            return self._adapters.get(PackageManagerKind(kind))
        except ValueError:
            return None

    def list_adapters(self) -> list[str]:
        """List registered adapter names in priority order."""
        return [kind.value for kind in self._adapters]

    def adapter_status(self) -> dict[str, dict[str, Any]]:
        """Availability of every registered adapter."""
        return {
            adapter.name: {
                "name": adapter.name,
                "binary": adapter.binary,
                "available": adapter.is_available(),
                "type": adapter.__class__.__name__,
            }
            for adapter in self._adapters.values()
        }

    def detect(self) -> PackageManagerAdapter | None:
        """Return the first available adapter, or None if none is present."""
        for adapter in self._adapters.values():
            if adapter.is_available():
                logger.info("Detected package manager: %s", adapter.name)
                return adapter
        logger.debug("No supported package manager found (tried %s)", ", ".join(self.list_adapters()))
        return None


def default_registry() -> AdapterRegistry:
    """Registry with every supported manager, in detection priority order."""
    from hostprep.adapters.package_managers import (
        ApkAdapter,
        AptAdapter,
        DnfAdapter,
        PacmanAdapter,
        ZypperAdapter,
    )

    registry = AdapterRegistry()
    registry.register(AptAdapter())
    registry.register(DnfAdapter())
    registry.register(PacmanAdapter())
    registry.register(ZypperAdapter())
    registry.register(ApkAdapter())
    return registry
