"""Translation path resolution.

Maps node registry entries to translation source and destination files for
the configured locale. Resolution is path arithmetic plus an existence check;
file contents are never read here.
"""

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from nodebuild.core.config import BuildConfig

logger = logging.getLogger(__name__)

TRANSLATIONS_DIR_NAME = "translations"


@dataclass(frozen=True)
class TranslationPaths:
    """Source translation file and the generated file it produces."""

    source: Path
    destination: Path


def node_directory_parts(registry_entry: str) -> tuple[str, ...]:
    """Return the directory segments of a registry entry (filename stripped).

    Example:
        >>> node_directory_parts("dist/nodes/Foo/Foo.node.js")
        ('dist', 'nodes', 'Foo')
    """
    return PurePosixPath(registry_entry).parts[:-1]


def resolve_translation_paths(config: BuildConfig, registry: list[str]) -> list[TranslationPaths]:
    """Resolve the translation files to generate, in manifest order.

    For each registry entry the source is
    ``<root>/<nodeDir>/translations/<locale><source_ext>`` (with
    ``source_strip_components`` leading segments dropped from nodeDir) and the
    destination is ``<root>/<nodeDir>/translations/<locale><destination_ext>``.

    Entries whose source does not exist are skipped. When several entries share
    a source, only the first one is kept.

    Args:
        config: Build configuration; its locale must be set
        registry: Node registry entries in manifest order

    Returns:
        Distinct source/destination pairs in first-seen order
    """
    if not config.locale:
        raise ValueError("Cannot resolve translation paths without a locale")

    source_name = f"{config.locale}{config.source_extension}"
    destination_name = f"{config.locale}{config.destination_extension}"

    seen: set[Path] = set()
    resolved: list[TranslationPaths] = []
    for entry in registry:
        node_dir = node_directory_parts(entry)
        source_dir = node_dir[config.source_strip_components :]
        source = config.package_root.joinpath(*source_dir, TRANSLATIONS_DIR_NAME, source_name)

        if source in seen:
            logger.debug("Skipping %s: source %s already resolved", entry, source)
            continue
        if not source.exists():
            logger.debug("Skipping %s: no translation at %s", entry, source)
            continue

        seen.add(source)
        destination = config.package_root.joinpath(
            *node_dir, TRANSLATIONS_DIR_NAME, destination_name
        )
        resolved.append(TranslationPaths(source=source, destination=destination))

    return resolved
