"""Exceptions raised by nodebuild operations.

Only the CLI boundary turns these into user-facing messages; core code lets
them propagate.
"""

from pathlib import Path


class NodeBuildError(Exception):
    """Base class for nodebuild failures."""


class ManifestError(NodeBuildError):
    """The package manifest is missing or does not declare a node list."""

    def __init__(self, manifest_path: Path, reason: str) -> None:
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"Invalid manifest {manifest_path}: {reason}")


class TranslationSourceError(NodeBuildError):
    """A translation source file cannot be parsed or has the wrong shape."""

    def __init__(self, source_path: Path, reason: str) -> None:
        self.source_path = source_path
        self.reason = reason
        super().__init__(f"Invalid translation source {source_path}: {reason}")
