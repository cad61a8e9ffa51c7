"""
Tests for pkgquery.config.parser module.
"""

import pytest

from pkgquery.config.parser import (
    CONFIG_FILE_NAME,
    PkgQueryConfig,
    load_config,
    parse_config,
)
from pkgquery.core.exceptions import ConfigError


def write_config(tmp_path, content: str):
    path = tmp_path / CONFIG_FILE_NAME
    path.write_text(content)
    return path


class TestDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        """Test that the defaults match the built-in behavior."""
        config = PkgQueryConfig()

        assert config.version == 1
        assert config.cache.size == 500
        assert config.commands.timeout is None
        assert config.commands.locale == "C"
        assert config.managers.enabled == ["dpkg", "rpm", "pacman"]

    def test_enabled_not_shared(self):
        """Test that each config gets its own list of package managers."""
        first = PkgQueryConfig()
        first.managers.enabled.remove("rpm")

        assert PkgQueryConfig().managers.enabled == ["dpkg", "rpm", "pacman"]


class TestParseConfig:
    """Test parse_config()."""

    def test_full_config(self, config_file):
        """Test parsing all sections."""
        config = parse_config(config_file)

        assert config.cache.size == 100
        assert config.commands.timeout == 30
        assert config.commands.locale == "C"
        assert config.managers.enabled == ["dpkg", "pacman"]

    def test_minimal_config(self, tmp_path):
        """Test that only the version is required."""
        config = parse_config(write_config(tmp_path, "version: 1\n"))

        assert config == PkgQueryConfig()

    def test_empty_sections(self, tmp_path):
        """Test that empty sections fall back to defaults."""
        config = parse_config(
            write_config(tmp_path, "version: 1\ncache:\ncommands:\nmanagers:\n")
        )

        assert config == PkgQueryConfig()

    def test_locale_disabled(self, tmp_path):
        """Test that locale null keeps the caller's environment."""
        config = parse_config(
            write_config(tmp_path, "version: 1\ncommands:\n  locale: null\n")
        )

        assert config.commands.locale is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            parse_config(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        with pytest.raises(ConfigError, match="empty"):
            parse_config(write_config(tmp_path, ""))

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            parse_config(write_config(tmp_path, "version: [1\n"))

    def test_not_a_mapping(self, tmp_path):
        with pytest.raises(ConfigError, match="mapping"):
            parse_config(write_config(tmp_path, "- 1\n- 2\n"))

    def test_missing_version(self, tmp_path):
        with pytest.raises(ConfigError, match="version"):
            parse_config(write_config(tmp_path, "cache:\n  size: 10\n"))

    def test_unsupported_version(self, tmp_path):
        with pytest.raises(ConfigError, match="Unsupported version"):
            parse_config(write_config(tmp_path, "version: 2\n"))

    @pytest.mark.parametrize("size", ["0", "-5", "abc", "true", "1.5"])
    def test_invalid_cache_size(self, tmp_path, size):
        """Test that the cache size must be a positive integer."""
        with pytest.raises(ConfigError, match="cache.size"):
            parse_config(write_config(tmp_path, f"version: 1\ncache:\n  size: {size}\n"))

    @pytest.mark.parametrize("timeout", ["0", "-1", "soon", "false"])
    def test_invalid_timeout(self, tmp_path, timeout):
        with pytest.raises(ConfigError, match="commands.timeout"):
            parse_config(
                write_config(tmp_path, f"version: 1\ncommands:\n  timeout: {timeout}\n")
            )

    def test_fractional_timeout(self, tmp_path):
        config = parse_config(
            write_config(tmp_path, "version: 1\ncommands:\n  timeout: 2.5\n")
        )

        assert config.commands.timeout == 2.5

    def test_invalid_locale(self, tmp_path):
        with pytest.raises(ConfigError, match="commands.locale"):
            parse_config(write_config(tmp_path, "version: 1\ncommands:\n  locale: 42\n"))

    def test_unknown_manager(self, tmp_path):
        with pytest.raises(ConfigError, match="Invalid package manager: apk"):
            parse_config(
                write_config(tmp_path, "version: 1\nmanagers:\n  enabled: [dpkg, apk]\n")
            )

    def test_enabled_not_a_list(self, tmp_path):
        with pytest.raises(ConfigError, match="must be a list"):
            parse_config(
                write_config(tmp_path, "version: 1\nmanagers:\n  enabled: dpkg\n")
            )

    def test_section_not_a_dict(self, tmp_path):
        with pytest.raises(ConfigError, match="cache must be a dictionary"):
            parse_config(write_config(tmp_path, "version: 1\ncache: 500\n"))

    def test_no_managers_enabled(self, tmp_path):
        """Test that all package managers can be disabled."""
        config = parse_config(
            write_config(tmp_path, "version: 1\nmanagers:\n  enabled: []\n")
        )

        assert config.managers.enabled == []


class TestLoadConfig:
    """Test load_config()."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        """Test that defaults are used if there is no config file."""
        monkeypatch.chdir(tmp_path)

        assert load_config() == PkgQueryConfig()

    def test_default_file_in_cwd(self, tmp_path, monkeypatch):
        """Test that ./pkgquery.yaml is picked up."""
        write_config(tmp_path, "version: 1\ncache:\n  size: 7\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().cache.size == 7

    def test_explicit_file(self, config_file):
        assert load_config(config_file).cache.size == 100

    def test_explicit_missing_file(self, tmp_path):
        """Test that an explicitly given file must exist."""
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml")
