"""
Domain models — pydantic types for hostprep.

All models are re-exported here for convenient access:

    from hostprep.core.models import AppSpec, InstallAction, InstallOutcome, RunReport
"""

from hostprep.core.models.action import InstallAction, InstallOutcome
from hostprep.core.models.app import AppSpec, ManualInstall, ThirdPartyRepo
from hostprep.core.models.package_manager import PackageManagerKind
from hostprep.core.models.report import DuplicateOutcomeError, RunReport
from hostprep.core.models.settings import Settings

__all__ = [
    # app.py
    "AppSpec",
    "DuplicateOutcomeError",
    # action.py
    "InstallAction",
    "InstallOutcome",
    "ManualInstall",
    # package_manager.py
    "PackageManagerKind",
    # report.py
    "RunReport",
    # settings.py
    "Settings",
    "ThirdPartyRepo",
]
