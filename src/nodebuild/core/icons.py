"""Icon asset copying for the ``build-icons`` task."""

import logging
from dataclasses import dataclass
from pathlib import Path

from nodebuild.core.output import OutputWriter

logger = logging.getLogger(__name__)

ICON_EXTENSIONS = frozenset({".png", ".svg"})
ICON_SOURCE_TREES = ("nodes", "credentials")


@dataclass(frozen=True)
class IconCopyResult:
    """Icons copied by one ``copy_icons`` run, as (source, destination) pairs."""

    copied: list[tuple[Path, Path]]

    @property
    def count(self) -> int:
        return len(self.copied)


def is_icon(source_root: Path, path: Path) -> bool:
    """Match ``**/*.{png,svg}`` glob semantics below source_root.

    Extensions are case-sensitive, and dot-prefixed files or directories are
    never matched.
    """
    if not path.is_file() or path.suffix not in ICON_EXTENSIONS:
        return False
    return not any(part.startswith(".") for part in path.relative_to(source_root).parts)


def find_icons(source_root: Path) -> list[Path]:
    """Find icon files at any depth under source_root, sorted.

    A missing source root yields an empty list.
    """
    if not source_root.is_dir():
        return []
    return sorted(path for path in source_root.rglob("*") if is_icon(source_root, path))


def copy_icons(package_root: Path, dist_dir: Path, writer: OutputWriter) -> IconCopyResult:
    """Copy node and credential icons into the distribution directory.

    ``<root>/nodes/**/*.{png,svg}`` lands in ``<dist>/nodes/`` and
    ``<root>/credentials/**/*.{png,svg}`` in ``<dist>/credentials/``, keeping
    the path below each source root. File contents are not transformed.

    Args:
        package_root: Directory containing the ``nodes`` and ``credentials`` trees
        dist_dir: Distribution directory receiving the copies
        writer: Output ops used for each copy

    Returns:
        IconCopyResult listing every copy in order (nodes first)
    """
    copied: list[tuple[Path, Path]] = []
    for tree in ICON_SOURCE_TREES:
        source_root = package_root / tree
        destination_root = dist_dir / tree
        for source in find_icons(source_root):
            destination = destination_root / source.relative_to(source_root)
            writer.copy_file(source, destination)
            copied.append((source, destination))
        logger.debug("Copied icons from %s to %s", source_root, destination_root)

    return IconCopyResult(copied=copied)
