"""Tests for dfs command."""

from click.testing import CliRunner
import pandas as pd
import pytest

from classic_algos.cli import main

WORKED_EXAMPLE = "4 5\n0 1\n0 2\n1 2\n2 3\n3 1\n"


class TestDfsCommand:
    """Test suite for dfs command."""

    @pytest.fixture
    def runner(self):
        """Create Click test runner."""
        return CliRunner()

    @pytest.fixture
    def graph_file(self, tmp_path):
        """Write the worked example graph to a file."""
        path = tmp_path / "graph.txt"
        path.write_text(WORKED_EXAMPLE)
        return path

    def test_dfs_from_stdin(self, runner):
        """Test text output read from stdin."""
        result = runner.invoke(main, ["dfs"], input=WORKED_EXAMPLE)

        assert result.exit_code == 0
        assert result.output == "0 1 2 3\n0 1 t\n0 2 f\n1 2 t\n2 3 t\n3 1 b\n"

    def test_dfs_from_file(self, runner, graph_file):
        """Test text output read from a file."""
        result = runner.invoke(main, ["dfs", str(graph_file)])

        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "0 1 2 3"

    def test_dfs_disconnected(self, runner):
        """Test isolated nodes appear in ascending order."""
        result = runner.invoke(main, ["dfs"], input="4 2\n0 3\n3 1\n")

        assert result.exit_code == 0
        assert result.output == "0 3 1 2\n0 3 t\n3 1 t\n"

    def test_dfs_csv_format(self, runner):
        """Test CSV printed to stdout."""
        result = runner.invoke(main, ["dfs", "--format", "csv"], input=WORKED_EXAMPLE)

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "tail,head,type"
        assert lines[-1] == "3,1,b"

    def test_dfs_csv_output_file(self, runner, graph_file, tmp_path):
        """Test classified edges exported to a CSV file."""
        output_file = tmp_path / "out" / "edges.csv"
        result = runner.invoke(main, ["dfs", str(graph_file), "-o", str(output_file)])

        assert result.exit_code == 0
        assert output_file.exists()
        df = pd.read_csv(output_file)
        assert list(df["type"]) == ["t", "f", "t", "t", "b"]

    def test_dfs_table_format(self, runner):
        """Test Rich table output."""
        result = runner.invoke(main, ["dfs", "-f", "table"], input=WORKED_EXAMPLE)

        assert result.exit_code == 0
        assert "Edge Classification" in result.output

    def test_dfs_format_from_config(self, runner, tmp_path):
        """Test default format taken from the config file."""
        config_file = tmp_path / "config.json"
        config_file.write_text('{"output": {"default_format": "csv"}}')

        result = runner.invoke(main, ["--config", str(config_file), "dfs"], input=WORKED_EXAMPLE)

        assert result.exit_code == 0
        assert result.output.startswith("tail,head,type")

    def test_dfs_invalid_input(self, runner):
        """Test out-of-range id aborts with no partial output."""
        result = runner.invoke(main, ["dfs"], input="2 1\n0 5\n")

        assert result.exit_code != 0
        assert "Error" in result.output
        assert "out of range" in result.output
        assert " t\n" not in result.output

    def test_dfs_missing_file(self, runner, tmp_path):
        """Test missing input file aborts."""
        result = runner.invoke(main, ["dfs", str(tmp_path / "nope.txt")])

        assert result.exit_code != 0
        assert "Input file not found" in result.output

    def test_dfs_verbose(self, runner):
        """Test verbose flag does not change the result lines."""
        result = runner.invoke(main, ["-v", "dfs"], input="1 1\n0 0\n")

        assert result.exit_code == 0
        assert "0 0 b" in result.output
