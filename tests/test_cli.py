"""Tests for the command-line interface - zero latency via --fast."""

import json

import pytest
import structlog
from typer.testing import CliRunner

from fanfetch import __version__
from fanfetch.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logger config bound to the runner's captured streams."""
    yield
    structlog.reset_defaults()


class TestCliBasics:
    """Test top-level options."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_config(self):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "comment_failure_rate" in result.stdout


class TestCliRuns:
    """Test strategy commands."""

    def test_sequential(self):
        result = runner.invoke(app, ["sequential", "u1", "--fast", "--failure-rate", "0", "-q"])
        assert result.exit_code == 0
        assert "Completed successfully" in result.stdout
        assert "Post #3" in result.stdout

    def test_parallel_shows_comment_errors(self):
        result = runner.invoke(app, ["parallel", "u1", "--fast", "--failure-rate", "1", "-q"])
        assert result.exit_code == 0
        assert "Comments error: Failed to fetch comments" in result.stdout
        assert "comments:2" in result.stdout

    def test_json_output(self):
        result = runner.invoke(
            app, ["parallel", "u1", "--fast", "--failure-rate", "0", "--json", "-q"]
        )
        assert result.exit_code == 0
        parsed = json.loads(result.stdout)
        assert parsed["errors"] == []
        assert len(parsed["posts"]) == 3

    def test_output_file(self, tmp_path):
        target = tmp_path / "report.json"
        result = runner.invoke(
            app, ["sequential", "u1", "--fast", "--seed", "3", "-q", "--output", str(target)]
        )
        assert result.exit_code == 0
        assert json.loads(target.read_text())["user_id"] == "u1"

    def test_compare(self):
        result = runner.invoke(app, ["compare", "u1", "--fast", "--failure-rate", "0", "-q"])
        assert result.exit_code == 0
        assert "sequential" in result.stdout
        assert "parallel" in result.stdout

    def test_blank_user_id_is_rejected(self):
        """Whitespace-only ids fail as a usage error, not a traceback."""
        for command in ("sequential", "parallel", "compare"):
            result = runner.invoke(app, [command, "   ", "--fast", "-q"])
            assert result.exit_code == 2
            assert not isinstance(result.exception, ValueError)
            assert "user id must not be empty" in result.output
