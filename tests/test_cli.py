"""Tests for CLI commands."""

from click.testing import CliRunner
import pytest

from classic_algos.cli import main


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


def test_main_help(runner):
    """Test main help command."""
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Classical Graph and String Algorithms" in result.output


def test_version(runner):
    """Test version command."""
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_dfs_help(runner):
    """Test dfs help command."""
    result = runner.invoke(main, ["dfs", "--help"])
    assert result.exit_code == 0
    assert "Classify the edges of a directed graph" in result.output


def test_edit_distance_help(runner):
    """Test edit-distance help command."""
    result = runner.invoke(main, ["edit-distance", "--help"])
    assert result.exit_code == 0
    assert "Compute the edit distance" in result.output


def test_connect_help(runner):
    """Test connect help command."""
    result = runner.invoke(main, ["connect", "--help"])
    assert result.exit_code == 0
    assert "Count the edges needed to connect" in result.output


def test_missing_config_file(runner, tmp_path):
    """Test an explicit config path that does not exist aborts."""
    result = runner.invoke(
        main, ["--config", str(tmp_path / "missing.json"), "connect"], input="1 0\n"
    )
    assert result.exit_code != 0
    assert "Config file not found" in result.output
