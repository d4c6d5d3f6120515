"""Functional tests for `unitcraft classify`.

A user classifies weights and size codes from the command line and gets the
category on stdout, or a usage error naming the rejected input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import pytest

from unitcraft.entrypoints.cli.main import unitcraft

if TYPE_CHECKING:
    from click.testing import CliRunner

# pylint: disable=magic-value-comparison

USAGE_ERROR = 2


class TestClassifyWeight:
    """A user asks for the tier of a weight."""

    @staticmethod
    @pytest.mark.parametrize(
        ("weight", "tier"),
        [
            ("0", "light"),
            ("10", "light"),
            ("11", "medium"),
            ("100", "medium"),
            ("101", "heavy"),
        ],
    )
    def test_tier_printed(runner: CliRunner, weight: str, tier: str):
        """The tier name is printed for every boundary."""
        result = runner.invoke(unitcraft, ["classify", "weight", weight])

        assert (result.exit_code, result.stdout) == (0, f"{tier}\n")

    @staticmethod
    def test_negative_rejected(runner: CliRunner):
        """A negative weight is a usage error naming the value."""
        result = runner.invoke(unitcraft, ["classify", "weight", "--", "-1"])

        assert result.exit_code == USAGE_ERROR
        assert "Weight must not be negative, got -1." in click.unstyle(result.output)

    @staticmethod
    def test_not_a_number(runner: CliRunner):
        """Non-integer input is rejected by Click before classification."""
        result = runner.invoke(unitcraft, ["classify", "weight", "heavy"])

        assert result.exit_code == USAGE_ERROR


class TestClassifySize:
    """A user asks for the size behind a code."""

    @staticmethod
    @pytest.mark.parametrize(
        ("code", "size"), [("s", "small"), ("m", "medium"), ("l", "large")]
    )
    def test_size_printed(runner: CliRunner, code: str, size: str):
        """The size name is printed."""
        result = runner.invoke(unitcraft, ["classify", "size", code])

        assert (result.exit_code, result.stdout) == (0, f"{size}\n")

    @staticmethod
    @pytest.mark.parametrize("code", ["C", "S", "x", ""])
    def test_unknown_code_rejected(runner: CliRunner, code: str):
        """Unknown codes are usage errors that show the code."""
        result = runner.invoke(unitcraft, ["classify", "size", code])

        assert result.exit_code == USAGE_ERROR
        assert f"Unknown size code: {code!r}" in click.unstyle(result.output)
