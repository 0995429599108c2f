"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from hostprep.adapters.mock import MockPackageManager
from hostprep.adapters.registry import AdapterRegistry
from hostprep.core.engine.executor import InstallExecutor
from hostprep.core.models.app import AppSpec
from hostprep.core.models.settings import Settings


@pytest.fixture(autouse=True)
def _restore_logging():
    """setup_logging() rewires the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the caller's hostprep env vars out of tests."""
    for var in ("HOSTPREP_CONFIG", "HOSTPREP_LOG_DIR", "HOSTPREP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def mock_pm() -> MockPackageManager:
    """An apt-like mock manager with nothing installed."""
    return MockPackageManager()


@pytest.fixture
def mock_registry(mock_pm: MockPackageManager) -> AdapterRegistry:
    registry = AdapterRegistry()
    registry.register(mock_pm)
    return registry


@pytest.fixture
def executor() -> InstallExecutor:
    return InstallExecutor(timeout=30)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    return Settings(log_dir=str(log_dir), probe_hosts=["127.0.0.1"], probe_timeout=1)


@pytest.fixture
def small_catalog() -> list[AppSpec]:
    return [AppSpec(name="nano"), AppSpec(name="htop"), AppSpec(name="tree")]
