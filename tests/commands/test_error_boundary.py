"""Tests for cli_error_boundary exit codes and messages."""

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from nodebuild.cli.error_boundary import cli_error_boundary
from nodebuild.core.errors import ManifestError, TranslationSourceError


def _command_raising(error: BaseException) -> click.Command:
    @click.command()
    @cli_error_boundary
    def failing() -> None:
        raise error

    return failing


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (
            FileNotFoundError("No such file: 'nodes/Foo/foo.svg'"),
            "Error: No such file: 'nodes/Foo/foo.svg'",
        ),
        (PermissionError("Permission denied: 'dist'"), "Error: Permission denied: 'dist'"),
        (ValueError("bad option"), "Error: bad option"),
        (
            ManifestError(Path("package.json"), "file not found"),
            "Error: Invalid manifest package.json: file not found",
        ),
        (
            TranslationSourceError(Path("de.json"), "parse error"),
            "Error: Invalid translation source de.json: parse error",
        ),
    ],
)
def test_known_errors_exit_1_with_message(error: BaseException, message: str) -> None:
    result = CliRunner().invoke(_command_raising(error))

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert result.output == f"{message}\n"


def test_unknown_errors_propagate() -> None:
    result = CliRunner().invoke(_command_raising(RuntimeError("boom")))

    assert isinstance(result.exception, RuntimeError)


def test_successful_command_exits_0() -> None:
    @click.command()
    @cli_error_boundary
    def ok() -> None:
        click.echo("done")

    result = CliRunner().invoke(ok)

    assert result.exit_code == 0
    assert result.output == "done\n"
