"""Build translations command - generate header and translation bundles."""

from pathlib import Path

import click

from nodebuild.cli.error_boundary import cli_error_boundary
from nodebuild.core.config import (
    DEFAULT_MANIFEST_NAMESPACE,
    DEFAULT_SOURCE_EXTENSION,
    LOCALE_ENV_VAR,
    BuildConfig,
)
from nodebuild.core.context import BuildContext
from nodebuild.core.translations.writer import write_headers_and_translations


@click.command(name="build-translations")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Package root containing package.json",
)
@click.option(
    "--locale",
    envvar=LOCALE_ENV_VAR,
    default=None,
    help=f"Locale to build (env: {LOCALE_ENV_VAR}); unset or 'en' skips the build",
)
@click.option(
    "--manifest",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Package descriptor listing the nodes (default: <root>/package.json)",
)
@click.option(
    "--dist",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Distribution directory for headers.js (default: <root>/dist)",
)
@click.option(
    "--namespace",
    default=DEFAULT_MANIFEST_NAMESPACE,
    show_default=True,
    help="Descriptor field holding the nodes list",
)
@click.option(
    "--source-ext",
    default=DEFAULT_SOURCE_EXTENSION,
    show_default=True,
    help="Extension of translation source files (.json, .yaml, .yml, .toml)",
)
@click.option(
    "--strip-components",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Leading registry path segments dropped when locating sources",
)
@click.option("--dry-run", is_flag=True, help="Show what would be written without writing")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@cli_error_boundary
def build_translations_command(
    root: Path,
    locale: str | None,
    manifest: Path | None,
    dist: Path | None,
    namespace: str,
    source_ext: str,
    strip_components: int,
    dry_run: bool,
    no_color: bool,
) -> None:
    """Write dist/nodes/headers.js and each node's translation bundle."""
    config = BuildConfig.for_package(
        root,
        locale,
        manifest_path=manifest,
        dist_dir=dist,
        manifest_namespace=namespace,
        source_extension=source_ext,
        source_strip_components=strip_components,
    )
    ctx = BuildContext.create(config, dry_run=dry_run, color=False if no_color else None)

    write_headers_and_translations(ctx)
