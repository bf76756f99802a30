"""Tests for configuration management."""

from pathlib import Path

from pydantic import ValidationError
import pytest

from classic_algos.core.config import Config, OutputConfig, load_config


class TestConfig:
    """Test Config model."""

    def test_defaults(self):
        config = Config()

        assert config.output.gap_marker == " "
        assert config.output.default_format == "text"
        assert config.verbose is False

    def test_load_from_file(self, tmp_path):
        """Test every field is read from JSON."""
        config_path = tmp_path / "config.json"
        config_path.write_text(
            '{"output": {"gap_marker": "-", "default_format": "table"}, "verbose": true}'
        )

        loaded = Config.load_from_file(config_path)

        assert loaded == Config(
            output=OutputConfig(gap_marker="-", default_format="table"), verbose=True
        )

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            Config.load_from_file(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        """Test malformed JSON is reported as a ValueError naming the file."""
        config_path = tmp_path / "broken.json"
        config_path.write_text("{not json")

        with pytest.raises(ValueError, match="Invalid JSON in config file"):
            Config.load_from_file(config_path)

    def test_invalid_gap_marker(self):
        """Test gap marker must be one character."""
        with pytest.raises(ValidationError):
            OutputConfig(gap_marker="--")

    def test_invalid_format(self):
        with pytest.raises(ValidationError):
            OutputConfig(default_format="xml")


class TestLoadConfig:
    """Test load_config lookup order."""

    def test_explicit_path(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text('{"output": {"gap_marker": "_"}}')

        assert load_config(config_path).output.gap_marker == "_"

    def test_working_directory_file(self, tmp_path, monkeypatch):
        """Test ./classic-algos.json is picked up when no path is given."""
        monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
        monkeypatch.chdir(tmp_path)
        (tmp_path / "classic-algos.json").write_text('{"verbose": true}')

        assert load_config().verbose is True

    def test_default_when_nothing_found(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", lambda: tmp_path / "home")
        monkeypatch.chdir(tmp_path)

        assert load_config() == Config()
