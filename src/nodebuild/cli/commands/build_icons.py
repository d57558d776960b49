"""Build icons command - copy node and credential icons into dist/."""

from pathlib import Path

import click

from nodebuild.cli.error_boundary import cli_error_boundary
from nodebuild.core.config import BuildConfig
from nodebuild.core.context import BuildContext
from nodebuild.core.icons import copy_icons


@click.command(name="build-icons")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Package root containing nodes/ and credentials/",
)
@click.option(
    "--dist",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Distribution directory (default: <root>/dist)",
)
@click.option("--dry-run", is_flag=True, help="Show what would be copied without copying")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@cli_error_boundary
def build_icons_command(root: Path, dist: Path | None, dry_run: bool, no_color: bool) -> None:
    """Copy *.png and *.svg icons from nodes/ and credentials/ into dist/."""
    config = BuildConfig.for_package(root, None, dist_dir=dist)
    ctx = BuildContext.create(config, dry_run=dry_run, color=False if no_color else None)

    result = copy_icons(config.package_root, config.dist_dir, ctx.writer)

    ctx.reporter.log(f"Copied {result.count} icon(s) to {config.dist_dir}")
