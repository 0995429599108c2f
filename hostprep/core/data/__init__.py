"""Static catalog data.

Usage::

    from hostprep.core.data import BASE_APPS, MANUAL_INSTALLS, build_catalog
"""

from hostprep.core.data.catalog import BASE_APPS, MANUAL_INSTALLS, build_catalog

__all__ = ["BASE_APPS", "MANUAL_INSTALLS", "build_catalog"]
