"""
Catalog models — what to install and how each manager names it.

An AppSpec is the logical application; its ``packages`` mapping only
lists the managers where the package name differs from the app name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hostprep.core.models.action import InstallAction
from hostprep.core.models.package_manager import PackageManagerKind

if TYPE_CHECKING:
    from hostprep.adapters.base import PackageManagerAdapter


class AppSpec(BaseModel):
    """One catalog entry."""

    model_config = ConfigDict(frozen=True)

    name: str
    binary: str | None = None       # executable probed on PATH (default: name)
    binaries: dict[PackageManagerKind, str] = Field(default_factory=dict)
    packages: dict[PackageManagerKind, str] = Field(default_factory=dict)
    unavailable: list[PackageManagerKind] = Field(default_factory=list)

    @property
    def executable(self) -> str:
        return self.binary or self.name

    def executable_for(self, kind: PackageManagerKind) -> str:
        """Executable probed on PATH under ``kind`` (some distros rename binaries)."""
        return self.binaries.get(kind, self.executable)

    def package_for(self, kind: PackageManagerKind) -> str | None:
        """Concrete package name for ``kind``, or None if not packaged there."""
        if kind in self.unavailable:
            return None
        return self.packages.get(kind, self.name)


class ThirdPartyRepo(BaseModel):
    """A signed apt source registered before installing from it."""

    model_config = ConfigDict(frozen=True)

    name: str                       # sources.list.d/<name>.list
    key_url: str
    keyring: str                    # dearmored key destination
    url: str
    suite: str = "stable"
    component: str = "main"

    @property
    def source_line(self) -> str:
        return f"deb [signed-by={self.keyring}] {self.url} {self.suite} {self.component}"

    @property
    def source_file(self) -> str:
        return f"/etc/apt/sources.list.d/{self.name}.list"

    def registration_steps(self) -> list[str]:
        """Shell steps that fetch the key and write the source list."""
        keyring_dir = self.keyring.rsplit("/", 1)[0]
        return [
            f"mkdir -p {keyring_dir}",
            f"curl -fsSL {self.key_url} | gpg --dearmor --yes -o {self.keyring}",
            f"echo '{self.source_line}' > {self.source_file}",
        ]


class ManualInstall(BaseModel):
    """An app installed by a bespoke command rather than a plain package request.

    Exactly one of ``script`` or ``repository`` is set.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    binary: str | None = None
    script: str | None = None
    repository: ThirdPartyRepo | None = None
    native_elsewhere: bool = False

    @model_validator(mode="after")
    def _check_source(self) -> ManualInstall:
        if (self.script is None) == (self.repository is None):
            raise ValueError(f"{self.name}: set exactly one of 'script' or 'repository'")
        return self

    @property
    def executable(self) -> str:
        return self.binary or self.name

    def resolve(self, adapter: PackageManagerAdapter) -> InstallAction | None:
        """Install action for the detected manager, or None if it doesn't apply."""
        if self.script is not None:
            return InstallAction.pipeline(self.script, label=self.name)

        assert self.repository is not None
        if adapter.kind.is_apt_like:
            return InstallAction.pipeline(
                *self.repository.registration_steps(),
                adapter.refresh_command().shell_text,
                adapter.install_command(self.name).shell_text,
                label=self.name,
            )
        if self.native_elsewhere:
            return adapter.install_command(self.name)
        return None
