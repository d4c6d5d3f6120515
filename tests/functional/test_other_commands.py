"""Functional tests for `unitcraft sequence`, `unitcraft complexity` and `unitcraft act`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import pytest

from unitcraft.entrypoints.cli.main import unitcraft

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import CliRunner

# pylint: disable=magic-value-comparison


class TestSequence:
    """A user reverses and sorts numbers."""

    @staticmethod
    def test_reverse(runner: CliRunner):
        """Numbers are printed in reverse order."""
        result = runner.invoke(unitcraft, ["sequence", "reverse", "3", "2", "1"])

        assert result.stdout == "1 2 3\n"

    @staticmethod
    def test_sort(runner: CliRunner):
        """Numbers are printed in ascending order."""
        result = runner.invoke(unitcraft, ["sequence", "sort", "2", "3", "1", "4"])

        assert result.stdout == "1 2 3 4\n"

    @staticmethod
    def test_sort_negative(runner: CliRunner):
        """Negative numbers are accepted after `--`."""
        result = runner.invoke(unitcraft, ["sequence", "sort", "--", "5", "-7", "0"])

        assert result.stdout == "-7 0 5\n"

    @staticmethod
    @pytest.mark.parametrize("command", ["reverse", "sort"])
    def test_empty(runner: CliRunner, command: str):
        """Without numbers an empty line is printed."""
        result = runner.invoke(unitcraft, ["sequence", command])

        assert (result.exit_code, result.stdout) == (0, "\n")


class TestComplexity:
    """A user drives a complexity tracker."""

    @staticmethod
    def test_fresh(runner: CliRunner):
        """Without increments the tracker is unchanged."""
        result = runner.invoke(unitcraft, ["complexity"])

        assert result.stdout == "complexity=0 changed=false\n"

    @staticmethod
    def test_twice_increased(runner: CliRunner):
        """Two increments are reported."""
        result = runner.invoke(unitcraft, ["complexity", "--increments", "2"])

        assert result.stdout == "complexity=2 changed=true\n"

    @staticmethod
    def test_negative_rejected(runner: CliRunner):
        """A negative increment count is a usage error."""
        result = runner.invoke(unitcraft, ["complexity", "--increments", "-1"])

        assert result.exit_code == 2


class TestAct:
    """A user lets the actor caller act."""

    @staticmethod
    def test_results_and_status(runner: CliRunner):
        """Each result is printed, followed by the actor status."""
        result = runner.invoke(unitcraft, ["act", "--times", "3"])

        assert result.stdout == "1\n2\n3\nstatus=3\n"

    @staticmethod
    def test_summary_on_stderr(runner: CliRunner):
        """A success summary goes to stderr."""
        result = runner.invoke(unitcraft, ["act"])

        assert "Actor performed 1 action(s)." in result.stderr


class TestLogging:
    """A user turns up logging while running a command."""

    @staticmethod
    def test_force_flush_writes_log(runner: CliRunner, log_path: Path):
        """With --force-flush the flight recorder is written on exit."""
        result = runner.invoke(unitcraft, ["--force-flush", "act"])

        assert result.exit_code == 0
        assert "Actor caller acted 1 time(s)" in log_path.read_text(encoding="utf-8")

    @staticmethod
    def test_no_flight_recorder(runner: CliRunner, log_path: Path):
        """With --no-flight-recorder nothing is written."""
        runner.invoke(unitcraft, ["--no-flight-recorder", "--force-flush", "act"])

        assert not log_path.exists()

    @staticmethod
    def test_force_flush_without_recorder_warns(runner: CliRunner):
        """Asking to flush a disabled flight recorder is pointed out."""
        result = runner.invoke(
            unitcraft, ["--no-flight-recorder", "--force-flush", "act"]
        )

        assert result.exit_code == 0
        assert "--force-flush has no effect" in result.stderr

    @staticmethod
    def test_verbose_shows_startup_summary(runner: CliRunner):
        """One -v brings the INFO startup summary to the console."""
        result = runner.invoke(unitcraft, ["-v", "--no-flight-recorder", "act"])

        assert result.exit_code == 0
        assert "console=INFO" in click.unstyle(result.stderr)

    @staticmethod
    def test_invalid_logger_level(runner: CliRunner):
        """A malformed -L value is a usage error."""
        result = runner.invoke(unitcraft, ["-L", "unitcraft=LOUD", "act"])

        assert result.exit_code == 2
