"""Adapters — package manager bindings.

Public re-exports for convenient access.
"""

from hostprep.adapters.base import PackageManagerAdapter
from hostprep.adapters.mock import MockPackageManager
from hostprep.adapters.registry import AdapterRegistry, default_registry

__all__ = [
    "AdapterRegistry",
    "MockPackageManager",
    "PackageManagerAdapter",
    "default_registry",
]
