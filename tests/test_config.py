"""
Tests for configuration loading — hostprep.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from hostprep.core.config.loader import ConfigError, find_config_file, load_settings
from hostprep.core.models.package_manager import PackageManagerKind


@pytest.fixture
def valid_config(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        log_dir: /tmp/hostprep-logs
        log_level: debug
        install_timeout: 600
        probe_hosts:
          - example.com
        extra_apps:
          - name: jq
          - name: bat
            binary: batcat
            packages:
              apt: bat
              dnf: bat
            unavailable: [apk]
    """)
    path = tmp_path / "hostprep.yml"
    path.write_text(content)
    return path


class TestLoadSettings:
    def test_valid(self, valid_config: Path):
        settings = load_settings(valid_config)
        assert settings.log_dir == "/tmp/hostprep-logs"
        assert settings.log_level == "DEBUG"
        assert settings.install_timeout == 600
        assert settings.probe_hosts == ["example.com"]
        bat = settings.extra_apps[1]
        assert bat.executable == "batcat"
        assert bat.package_for(PackageManagerKind.APK) is None

    def test_defaults_when_no_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = load_settings()
        assert settings.log_dir == "/var/log"
        assert settings.install_timeout == 1800
        assert settings.extra_apps == []

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "hostprep.yml"
        path.write_text("")
        assert load_settings(path).log_level == "INFO"

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "hostprep.yml"
        path.write_text("log_dir: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "hostprep.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(path)

    @pytest.mark.parametrize(
        "content",
        [
            "install_timeout: 0\n",
            "log_level: LOUD\n",
            "probe_hosts: []\n",
            "extra_apps:\n  - packages: {apt: x}\n",
            "extra_apps:\n  - name: x\n    packages: {brew: x}\n",
        ],
    )
    def test_schema_errors(self, tmp_path: Path, content: str):
        path = tmp_path / "hostprep.yml"
        path.write_text(content)
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_settings(path)

    def test_env_log_dir_override(self, valid_config: Path, monkeypatch):
        monkeypatch.setenv("HOSTPREP_LOG_DIR", "/srv/logs")
        assert load_settings(valid_config).log_dir == "/srv/logs"

    def test_env_config_path(self, valid_config: Path, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path.parent)
        monkeypatch.setenv("HOSTPREP_CONFIG", str(valid_config))
        assert load_settings().install_timeout == 600

    def test_env_config_path_missing(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("HOSTPREP_CONFIG", str(tmp_path / "gone.yml"))
        with pytest.raises(ConfigError):
            load_settings()


class TestFindConfigFile:
    def test_walks_up(self, valid_config: Path):
        nested = valid_config.parent / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == valid_config

    def test_not_found(self, tmp_path: Path):
        # tmp_path has no hostprep.yml; parents are system dirs
        found = find_config_file(tmp_path)
        assert found is None or found.parent != tmp_path
