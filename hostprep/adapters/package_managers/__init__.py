"""Native package manager adapters, one per supported family."""

from hostprep.adapters.package_managers.apk import ApkAdapter
from hostprep.adapters.package_managers.apt import AptAdapter
from hostprep.adapters.package_managers.dnf import DnfAdapter
from hostprep.adapters.package_managers.pacman import PacmanAdapter
from hostprep.adapters.package_managers.zypper import ZypperAdapter

__all__ = [
    "ApkAdapter",
    "AptAdapter",
    "DnfAdapter",
    "PacmanAdapter",
    "ZypperAdapter",
]
