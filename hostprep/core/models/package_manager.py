"""
Package manager identity — which native manager drives this host.
"""

from __future__ import annotations

from enum import Enum


class PackageManagerKind(str, Enum):
    """Supported package manager families.

    Declaration order is the detection priority order.
    """

    APT = "apt"
    DNF = "dnf"
    PACMAN = "pacman"
    ZYPPER = "zypper"
    APK = "apk"

    @property
    def is_apt_like(self) -> bool:
        return self is PackageManagerKind.APT

    def __str__(self) -> str:
        return self.value
