"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from gutterdiff.config.defaults import DEFAULT_TOML
from gutterdiff.config.loader import ConfigError, find_config_file, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("GUTTERDIFF_FORMAT", raising=False)
    monkeypatch.delenv("GUTTERDIFF_GIT_TIMEOUT", raising=False)


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.output.format == "terminal"
        assert cfg.git.timeout == 30
        assert cfg.git.include_staged is True
        assert cfg.markers.added_style == "green"

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".gutterdiff.toml").write_text(
            'version = "1.0"\n'
            '[git]\n'
            'context_lines = 0\n'
            '[output]\n'
            'format = "json"\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.git.context_lines == 0
        assert cfg.output.format == "json"

    def test_yaml_config(self, tmp_path: Path):
        (tmp_path / ".gutterdiff.yaml").write_text(
            "git:\n"
            "  include_staged: false\n"
            "markers:\n"
            "  deleted: '-'\n"
        )
        cfg = load_config(tmp_path)
        assert cfg.git.include_staged is False
        assert cfg.markers.deleted == "-"

    def test_toml_preferred_over_yaml(self, tmp_path: Path):
        (tmp_path / ".gutterdiff.toml").write_text('[git]\ntimeout = 5\n')
        (tmp_path / ".gutterdiff.yml").write_text("git:\n  timeout: 9\n")
        assert find_config_file(tmp_path) == tmp_path / ".gutterdiff.toml"
        assert load_config(tmp_path).git.timeout == 5

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".gutterdiff.toml").write_text('[output]\nshow_summary = false\ncolour = "always"\n')
        cfg = load_config(tmp_path)
        assert cfg.output.show_summary is False

    def test_starter_template_loads(self, tmp_path: Path):
        (tmp_path / ".gutterdiff.toml").write_text(DEFAULT_TOML, encoding="utf-8")
        cfg = load_config(tmp_path)
        assert cfg.output.format == "terminal"
        assert cfg.git.context_lines == 3

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[output]\nformat = "json"\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.output.format == "json"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".gutterdiff.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_yaml_list_raises(self, tmp_path: Path):
        (tmp_path / ".gutterdiff.yaml").write_text("- one\n- two\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        (tmp_path / ".gutterdiff.yaml").write_text("")
        assert load_config(tmp_path).output.format == "terminal"

    def test_invalid_format_raises(self, tmp_path: Path):
        (tmp_path / ".gutterdiff.toml").write_text('[output]\nformat = "sarif"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvOverrides:
    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GUTTERDIFF_FORMAT", "json")
        assert load_config(tmp_path).output.format == "json"

    def test_invalid_format_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GUTTERDIFF_FORMAT", "html")
        assert load_config(tmp_path).output.format == "terminal"

    def test_timeout_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GUTTERDIFF_GIT_TIMEOUT", "5")
        assert load_config(tmp_path).git.timeout == 5

    def test_invalid_timeout_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GUTTERDIFF_GIT_TIMEOUT", "soon")
        assert load_config(tmp_path).git.timeout == 30
