"""The ``build-translations`` task.

Writes all node headers to ``<dist>/nodes/headers.js`` and each node
translation to ``<nodeDir>/translations/<locale>.js``.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from nodebuild.core.context import BuildContext
from nodebuild.core.manifest import load_node_registry
from nodebuild.core.translations.aggregation import aggregate_headers_and_translations
from nodebuild.core.translations.emitter import render_module
from nodebuild.core.translations.paths import resolve_translation_paths

logger = logging.getLogger(__name__)

BuildStatus = Literal["skipped", "completed"]


@dataclass(frozen=True)
class TranslationBuildResult:
    """Outcome of one translation build."""

    status: BuildStatus
    headers_path: Path | None = None
    translation_paths: list[Path] = field(default_factory=list)


def write_headers_and_translations(ctx: BuildContext) -> TranslationBuildResult:
    """Generate the aggregated header file and per-node translation files.

    Skips entirely when the locale is unset or the default locale. Every file
    is on disk when this returns a ``completed`` result.

    Raises:
        ManifestError: If the node registry cannot be read
        TranslationSourceError: If a translation source is malformed
        OSError: If a generated file cannot be written
    """
    config = ctx.config
    reporter = ctx.reporter

    reporter.log(f"Default locale set to: {reporter.emphasize(config.effective_locale)}")

    if not config.is_translation_enabled:
        reporter.log("No translation required - Skipping translations build...")
        return TranslationBuildResult(status="skipped")

    registry = load_node_registry(config.manifest_path, config.manifest_namespace)
    paths = resolve_translation_paths(config, registry)
    logger.debug("Resolved %d translation sources for locale %s", len(paths), config.locale)

    aggregated = aggregate_headers_and_translations(paths, config.allowed_header_keys)

    headers_path = config.headers_destination

    # Render every module before the first write; a failure must leave no partial output.
    rendered_headers = render_module(aggregated.headers)
    rendered_bundles = [
        (bundle.destination_path, render_module(bundle.content))
        for bundle in aggregated.translations
    ]

    ctx.writer.write_text(headers_path, rendered_headers)

    reporter.log("Headers translation file written to:")
    reporter.log(str(headers_path), bullet=True)

    for destination_path, content in rendered_bundles:
        ctx.writer.write_text(destination_path, content)

    reporter.log("Main translation files written to:")
    for bundle in aggregated.translations:
        reporter.log(str(bundle.destination_path), bullet=True)

    return TranslationBuildResult(
        status="completed",
        headers_path=headers_path,
        translation_paths=[bundle.destination_path for bundle in aggregated.translations],
    )
