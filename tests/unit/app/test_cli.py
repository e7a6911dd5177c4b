"""Test cases for the command-line interface."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from dusort.app.cli import EXIT_SCAN_ERROR, cli
from dusort.core.reporter import summarize
from tests.fixtures.filesystem_trees import failing_path_method


class TestCLIBasicFunctionality:
    """Test basic CLI functionality."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        """Create a CLI runner for testing."""
        return CliRunner()

    def test_cli_help_command(self, runner: CliRunner) -> None:
        """Test that help is printed and no scan runs."""
        with patch("dusort.app.cli.summarize") as mock_summarize:
            result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "--bytes" in result.output
        assert "--localfs" in result.output
        mock_summarize.assert_not_called()

    def test_cli_help_short_form(self, runner: CliRunner) -> None:
        """Test that -h is accepted as help."""
        result = runner.invoke(cli, ["-h"])

        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_cli_version_command(self, runner: CliRunner) -> None:
        """Test version command."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "dusort" in result.output

    def test_cli_default_directory(
        self, runner: CliRunner, example_tree: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the current directory is scanned by default."""
        monkeypatch.chdir(example_tree)

        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "    500B a",
            "      1K b",
            "      2M sub",
            "",
            "      2M total",
        ]

    def test_cli_directory_argument(self, runner: CliRunner, example_tree: Path) -> None:
        """Test that rows show the directory joined with each name."""
        result = runner.invoke(cli, [str(example_tree)])

        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == f"    500B {example_tree / 'a'}"

    @pytest.mark.parametrize("flag", ["--bytes", "-b"])
    def test_cli_bytes_option(
        self, runner: CliRunner, example_tree: Path, monkeypatch: pytest.MonkeyPatch, flag: str
    ) -> None:
        """Test raw byte output in both option forms."""
        monkeypatch.chdir(example_tree)

        result = runner.invoke(cli, [flag])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "         500 a",
            "        1500 b",
            "     2000000 sub",
            "",
            "     2002000 total",
        ]

    @pytest.mark.parametrize("flag", ["--localfs", "-x"])
    def test_cli_localfs_option(self, runner: CliRunner, example_tree: Path, flag: str) -> None:
        """Test that containment reaches the reporter configuration."""
        with patch("dusort.app.cli.summarize", wraps=summarize) as spy:
            result = runner.invoke(cli, [flag, str(example_tree)])

        assert result.exit_code == 0
        config = spy.call_args.args[1]
        assert config.stay_on_filesystem is True
        assert config.bytes_only is False

    def test_cli_combined_short_options(self, runner: CliRunner, example_tree: Path) -> None:
        """Test that -b and -x combine."""
        result = runner.invoke(cli, ["-bx", str(example_tree)])

        assert result.exit_code == 0
        assert result.stdout.splitlines()[-1] == "     2002000 total"


class TestCLIErrorHandling:
    """Test CLI error reporting and exit codes."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        """Create a CLI runner for testing."""
        return CliRunner()

    def test_recoverable_errors_go_to_stderr(self, runner: CliRunner, example_tree: Path) -> None:
        """Test that unreadable entries are reported but do not fail the run."""
        locked = example_tree / "sub"

        with failing_path_method("iterdir", [locked]):
            result = runner.invoke(cli, [str(example_tree)])

        assert result.exit_code == 0
        assert result.stderr.splitlines() == [f"{locked}: Permission denied"]
        assert f"      0B {locked}" in result.stdout.splitlines()
        assert result.stdout.splitlines()[-1] == "      2K total"

    def test_missing_directory_is_fatal(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that an unreadable scan root exits non-zero with no report."""
        missing = tmp_path / "missing"

        result = runner.invoke(cli, [str(missing)])

        assert result.exit_code == EXIT_SCAN_ERROR
        assert result.stdout == ""
        assert result.stderr.strip() == f"{missing}: No such file or directory"

    def test_unknown_option(self, runner: CliRunner) -> None:
        """Test that argument errors use the usage exit code."""
        result = runner.invoke(cli, ["--frobnicate"])

        assert result.exit_code == 2
        assert "No such option" in result.output

    def test_too_many_arguments(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test that only one directory is accepted."""
        result = runner.invoke(cli, [str(tmp_path), str(tmp_path)])

        assert result.exit_code == 2

    def test_invalid_log_level(self, runner: CliRunner) -> None:
        """Test that configuration errors surface as usage errors without a scan."""
        with patch("dusort.app.cli.summarize") as mock_summarize:
            result = runner.invoke(cli, ["--log-level", "LOUD"])

        assert result.exit_code == 2
        assert "Configuration validation failed" in result.stderr
        assert "Field: log_level" in result.stderr
        mock_summarize.assert_not_called()

    def test_log_level_case_insensitive(self, runner: CliRunner, example_tree: Path) -> None:
        """Test that the log level is normalized before use."""
        with patch("dusort.app.cli.configure_logging") as mock_configure:
            result = runner.invoke(cli, ["--log-level", "info", str(example_tree)])

        assert result.exit_code == 0
        mock_configure.assert_called_once_with(log_level="INFO")
