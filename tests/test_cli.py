"""
Tests for CLI commands — install, detect, catalog, and global options.
"""

import json
from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from hostprep.adapters.mock import MockPackageManager
from hostprep.adapters.registry import AdapterRegistry
from hostprep.main import cli

_USE_CASE = "hostprep.core.use_cases.install"
_PREFLIGHT = "hostprep.core.services.preflight"


@pytest.fixture(autouse=True)
def _no_signal_handlers():
    with patch("hostprep.main._install_signal_handlers"):
        yield


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty cwd so no stray hostprep.yml is picked up; logs stay in it too."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOSTPREP_LOG_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def patched_registry(mock_registry: AdapterRegistry):
    with patch(f"{_USE_CASE}.default_registry", return_value=mock_registry):
        yield mock_registry


class TestCLIGlobal:
    """Tests for global CLI behavior."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "install a base set of CLI tools" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestInstallCommand:
    """Tests for the install command."""

    def test_dry_run(self, workdir, patched_registry):
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--dry-run"])
        assert result.exit_code == 0, result.output
        assert "[dry-run] true" in result.output
        assert "=== Installation Summary ===" in result.output
        assert "✓ htop (dry-run)" in result.output

    def test_dry_run_needs_no_root(self, workdir, patched_registry):
        runner = CliRunner()
        with patch(f"{_PREFLIGHT}.is_root", return_value=False):
            result = runner.invoke(cli, ["install", "--dry-run"])
        assert result.exit_code == 0

    def test_not_root(self, workdir, patched_registry):
        runner = CliRunner()
        with patch(f"{_PREFLIGHT}.is_root", return_value=False):
            result = runner.invoke(cli, ["install"])
        assert result.exit_code == 1
        assert "must be run as root" in result.output

    def test_unsupported_system(self, workdir):
        runner = CliRunner()
        with patch(f"{_USE_CASE}.default_registry", return_value=AdapterRegistry()):
            result = runner.invoke(cli, ["install", "--dry-run"])
        assert result.exit_code == 1
        assert "Unsupported system" in result.output

    def test_invalid_config(self, workdir):
        config = workdir / "hostprep.yml"
        config.write_text("install_timeout: -1\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config), "install", "--dry-run"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_dry_run_json(self, workdir, patched_registry):
        runner = CliRunner()
        result = runner.invoke(cli, ["install", "--dry-run", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        report = data["report"]
        assert data["manager"] == "apt"
        assert report["dry_run"] is True
        assert report["failed"] == []
        assert all(entry["dry_run"] for entry in report["newly_installed"])

    def test_real_run_writes_log_file(self, workdir, patched_registry, monkeypatch):
        log_dir = workdir / "logs"
        log_dir.mkdir()
        monkeypatch.setenv("HOSTPREP_LOG_DIR", str(log_dir))
        patched_registry.get("apt").set_installed("nano")

        runner = CliRunner()
        with patch(f"{_PREFLIGHT}.is_root", return_value=True), \
             patch(f"{_PREFLIGHT}.check_network", return_value=True), \
             patch(f"{_USE_CASE}.MANUAL_INSTALLS", []):
            result = runner.invoke(cli, ["install"])

        assert result.exit_code == 0, result.output
        assert "✓ nano is already installed" in result.output
        log_file = log_dir / f"hostprep-{date.today().isoformat()}.log"
        content = log_file.read_text()
        assert "Installation Summary" in content
        assert "✓ htop" in content

    def test_verbose_prints_progress_once(self, workdir, patched_registry):
        runner = CliRunner()
        with patch(f"{_PREFLIGHT}.is_root", return_value=True), \
             patch(f"{_PREFLIGHT}.check_network", return_value=True), \
             patch(f"{_USE_CASE}.MANUAL_INSTALLS", []):
            result = runner.invoke(cli, ["-v", "install"])
        assert result.exit_code == 0, result.output
        assert result.output.count("Installing htop...") == 1
        assert result.output.count("✓ Successfully installed htop") == 1

    def test_failures_still_exit_zero(self, workdir, patched_registry):
        patched_registry.get("apt").set_failure("htop", "E: broken")
        runner = CliRunner()
        with patch(f"{_PREFLIGHT}.is_root", return_value=True), \
             patch(f"{_PREFLIGHT}.check_network", return_value=True), \
             patch(f"{_USE_CASE}.MANUAL_INSTALLS", []):
            result = runner.invoke(cli, ["install"])
        assert result.exit_code == 0
        assert "✗ htop: E: broken" in result.output


class TestDetectCommand:
    def test_detected(self):
        registry = AdapterRegistry()
        registry.register(MockPackageManager())
        runner = CliRunner()
        with patch("hostprep.adapters.registry.default_registry", return_value=registry):
            result = runner.invoke(cli, ["detect", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["detected"] == "apt"

    def test_none(self):
        registry = AdapterRegistry()
        registry.register(MockPackageManager(available=False))
        runner = CliRunner()
        with patch("hostprep.adapters.registry.default_registry", return_value=registry):
            result = runner.invoke(cli, ["detect"])
        assert result.exit_code == 1
        assert "No supported package manager found" in result.output


class TestCatalogCommand:
    def test_dnf_names(self, workdir):
        runner = CliRunner()
        result = runner.invoke(cli, ["catalog", "--manager", "dnf", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        packages = {app["name"]: app["package"] for app in data["apps"]}
        assert packages["fd"] == "fd-find"
        assert packages["nala"] is None
        manual = {m["name"]: m["command"] for m in data["manual"]}
        assert manual["gping"] is None
        assert manual["eza"] == "dnf install -y eza"

    def test_extra_apps_listed(self, workdir):
        (workdir / "hostprep.yml").write_text("extra_apps:\n  - name: jq\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["catalog", "-m", "apt"])
        assert result.exit_code == 0
        assert "• jq" in result.output
        assert "fd → fd-find" in result.output
