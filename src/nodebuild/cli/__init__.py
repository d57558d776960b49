"""Static CLI definition for nodebuild.

Each build task is a subcommand so an external orchestrator can invoke them
independently.
"""

import logging
import os

import click

from nodebuild import __version__
from nodebuild.cli.commands.build_icons import build_icons_command
from nodebuild.cli.commands.build_translations import build_translations_command

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

DEBUG_ENV_VAR = "NODEBUILD_DEBUG"


def configure_logging(verbose: bool) -> None:
    """Enable debug diagnostics when verbose or NODEBUILD_DEBUG is set."""
    if verbose or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(name="nodebuild", context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Show debug diagnostics")
def cli(verbose: bool) -> None:
    """Build steps for node packages."""
    configure_logging(verbose)


# Register all commands
cli.add_command(build_icons_command)
cli.add_command(build_translations_command)


if __name__ == "__main__":
    cli()
