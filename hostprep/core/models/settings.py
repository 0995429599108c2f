"""
Settings model — runtime configuration for a bootstrap run.

Loaded from hostprep.yml when one exists; every field has a default so
the tool runs with no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from hostprep.core.models.app import AppSpec


class Settings(BaseModel):
    """Validated hostprep.yml contents."""

    log_dir: str = "/var/log"
    log_level: str = "INFO"             # level written to the log file
    install_timeout: int = Field(default=1800, gt=0)
    probe_hosts: list[str] = Field(default_factory=lambda: ["1.1.1.1", "8.8.8.8"])
    probe_timeout: int = Field(default=5, gt=0)
    extra_apps: list[AppSpec] = Field(default_factory=list)

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("probe_hosts")
    @classmethod
    def _non_empty_hosts(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("probe_hosts must list at least one host")
        return v
