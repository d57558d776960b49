"""Tests for enabling debug diagnostics from the CLI entry point."""

import logging
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from nodebuild.cli import cli


def _invoke(args: list[str], env: dict[str, str | None]):
    with patch("nodebuild.cli.logging.basicConfig") as mock_basic_config:
        result = CliRunner().invoke(cli, args, env=env)
    return result, mock_basic_config


def test_verbose_flag_enables_debug_logging(tmp_path: Path) -> None:
    result, mock_basic_config = _invoke(
        ["--verbose", "build-icons", "--root", str(tmp_path)], env={"NODEBUILD_DEBUG": None}
    )

    assert result.exit_code == 0, result.output
    mock_basic_config.assert_called_once()
    assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG


def test_short_verbose_flag(tmp_path: Path) -> None:
    result, mock_basic_config = _invoke(
        ["-v", "build-icons", "--root", str(tmp_path)], env={"NODEBUILD_DEBUG": None}
    )

    assert result.exit_code == 0, result.output
    mock_basic_config.assert_called_once()


def test_debug_environment_variable_enables_debug_logging(tmp_path: Path) -> None:
    result, mock_basic_config = _invoke(
        ["build-icons", "--root", str(tmp_path)], env={"NODEBUILD_DEBUG": "1"}
    )

    assert result.exit_code == 0, result.output
    mock_basic_config.assert_called_once()
    assert mock_basic_config.call_args.kwargs["level"] == logging.DEBUG


def test_debug_logging_off_by_default(tmp_path: Path) -> None:
    result, mock_basic_config = _invoke(
        ["build-icons", "--root", str(tmp_path)], env={"NODEBUILD_DEBUG": None}
    )

    assert result.exit_code == 0, result.output
    mock_basic_config.assert_not_called()
