"""
L0 Data — the base app catalog.

Pure data. Package names only appear in ``packages`` where a manager
family names the app differently.
"""

from __future__ import annotations

import logging

from hostprep.core.models.app import AppSpec, ManualInstall, ThirdPartyRepo
from hostprep.core.models.package_manager import PackageManagerKind as PM

logger = logging.getLogger(__name__)

BASE_APPS: list[AppSpec] = [
    AppSpec(name="nano"),
    AppSpec(name="git"),
    AppSpec(name="curl"),
    AppSpec(name="wget"),
    AppSpec(name="htop"),
    AppSpec(name="tmux"),
    AppSpec(
        name="nala",
        unavailable=[PM.DNF, PM.PACMAN, PM.ZYPPER, PM.APK],
    ),
    AppSpec(
        name="fd",
        # Debian ships the binary as fdfind.
        binaries={PM.APT: "fdfind"},
        packages={PM.APT: "fd-find", PM.DNF: "fd-find"},
    ),
    AppSpec(name="zoxide"),
    AppSpec(name="duf"),
    AppSpec(name="tree"),
]

MCFLY_INSTALL_URL = "https://raw.githubusercontent.com/cantino/mcfly/master/ci/install.sh"

AZLUX_REPO = ThirdPartyRepo(
    name="azlux",
    key_url="https://azlux.fr/repo.gpg",
    keyring="/usr/share/keyrings/azlux-archive-keyring.gpg",
    url="http://packages.azlux.fr/debian/",
)

GIERENS_REPO = ThirdPartyRepo(
    name="gierens",
    key_url="https://raw.githubusercontent.com/eza-community/eza/main/deb.asc",
    keyring="/etc/apt/keyrings/gierens.gpg",
    url="http://deb.gierens.de",
)

# Fixed order: remote script, apt-only repository, repository-on-apt.
MANUAL_INSTALLS: list[ManualInstall] = [
    ManualInstall(
        name="mcfly",
        # Command substitution fails the && chain if the download fails,
        # which a plain ``curl | sh`` would hide.
        script=(
            f'installer="$(curl -LSfs {MCFLY_INSTALL_URL})" && '
            'printf "%s\\n" "$installer" | sh -s -- --git cantino/mcfly'
        ),
    ),
    ManualInstall(name="gping", repository=AZLUX_REPO),
    ManualInstall(name="eza", repository=GIERENS_REPO, native_elsewhere=True),
]


def build_catalog(
    extra: list[AppSpec] | None = None,
    manual_installs: list[ManualInstall] | None = None,
) -> list[AppSpec]:
    """Base apps followed by configured extras, dropping duplicate names.

    Extras named like a base app or a manual install are skipped; those
    apps are already handled.
    """
    if manual_installs is None:
        manual_installs = MANUAL_INSTALLS
    catalog = list(BASE_APPS)
    seen = {app.name for app in catalog} | {m.name for m in manual_installs}
    for app in extra or []:
        if app.name in seen:
            logger.warning("Ignoring extra app %s: already in the catalog", app.name)
            continue
        seen.add(app.name)
        catalog.append(app)
    return catalog
