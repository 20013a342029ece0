"""Tests for the configuration module."""

import pytest
import tempfile
import yaml
from dataclasses import replace
from pathlib import Path
from term_gopher.config import Config, DEFAULT_STYLES, load_config


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self):
        """Config has sensible defaults."""
        config = Config()
        assert config.default_port == 70
        assert config.timeout_seconds == 10.0
        assert config.encoding == "utf-8"
        assert config.color is True
        assert config.styles == DEFAULT_STYLES
        assert config.command_prefix == "/"
        assert config.log_file is None

    def test_custom_values(self):
        """Config accepts custom values."""
        config = Config(
            default_port=7070,
            timeout_seconds=3,
            color=False,
            download_directory="/tmp/downloads",
        )
        assert config.default_port == 7070
        assert config.timeout_seconds == 3
        assert config.color is False

    def test_frozen(self):
        """Config is a static record."""
        config = Config()
        with pytest.raises(AttributeError):
            config.default_port = 71

    def test_replace(self):
        config = replace(Config(), color=False)
        assert config.color is False

    def test_default_styles_not_shared(self):
        assert Config().styles is not DEFAULT_STYLES


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_from_yaml_file(self):
        """Load config from YAML file."""
        yaml_content = """
network:
  default_port: 7070
  timeout_seconds: 2.5
  encoding: latin-1

display:
  color: false
  styles:
    error: purple

commands:
  prefix: ":"

downloads:
  directory: /tmp/gopher-downloads

logging:
  file: /tmp/term-gopher.log
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.default_port == 7070
            assert config.timeout_seconds == 2.5
            assert config.encoding == "latin-1"
            assert config.color is False
            assert config.styles["error"] == "purple"
            assert config.command_prefix == ":"
            assert config.download_directory == "/tmp/gopher-downloads"
            assert config.log_file == "/tmp/term-gopher.log"

    def test_style_overrides_merge_with_defaults(self):
        yaml_content = """
display:
  styles:
    item:submenu: yellow
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.styles["item:submenu"] == "yellow"
            assert config.styles["error"] == DEFAULT_STYLES["error"]

    def test_load_partial_config(self):
        """Load config with partial values (rest use defaults)."""
        yaml_content = """
network:
  timeout_seconds: 30
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.timeout_seconds == 30
            # Rest should be defaults
            assert config.default_port == 70
            assert config.command_prefix == "/"

    def test_load_empty_file(self):
        """Load config from empty file uses defaults."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = load_config(f.name)

            assert config == Config()

    def test_load_nonexistent_file_raises(self):
        """Loading nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_expand_home_directory(self):
        """Home directory is expanded in download_directory."""
        config = Config(download_directory="~/gopher-downloads")
        expanded = config.get_download_path()

        assert "~" not in str(expanded)
        assert expanded.name == "gopher-downloads"

    def test_get_download_path_returns_path_object(self):
        config = Config(download_directory="/tmp/test")
        path = config.get_download_path()
        assert isinstance(path, Path)
        assert str(path) == "/tmp/test"

    def test_load_handlers(self, tmp_path):
        """The handlers section names external programs."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "handlers:\n"
            "  browser: firefox\n"
            "  image: feh --scale-down\n"
            "  pager: less -R\n"
        )

        config = load_config(config_file)

        assert config.browser_command == "firefox"
        assert config.image_command == "feh --scale-down"
        assert config.telnet_command is None
        assert config.pager_command == "less -R"

    def test_handlers_default_to_none(self):
        config = Config()
        assert config.browser_command is None
        assert config.image_command is None
        assert config.telnet_command is None
        assert config.pager_command is None

    def test_section_must_be_mapping(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("network: 5\n")

        with pytest.raises(ValueError, match="network"):
            load_config(config_file)

    def test_styles_must_be_mapping(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("display:\n  styles: red\n")

        with pytest.raises(ValueError, match="styles"):
            load_config(config_file)

    def test_top_level_must_be_mapping(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- just\n- a list\n")

        with pytest.raises(ValueError):
            load_config(config_file)

    def test_malformed_yaml_raises(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("network: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            load_config(config_file)
