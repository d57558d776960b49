"""Dry-run output writer.

Reports each write or copy through the build reporter instead of performing it.
"""

from pathlib import Path

from nodebuild.core.output.abc import OutputWriter
from nodebuild.core.reporter import BuildReporter


class DryRunOutputWriter(OutputWriter):
    """Writer that prints what would happen and leaves the file system untouched.

    Usage:
        writer = DryRunOutputWriter(ClickReporter())
        writer.write_text(path, content)  # prints "[DRY RUN] Would write ..."
    """

    def __init__(self, reporter: BuildReporter) -> None:
        self._reporter = reporter

    def write_text(self, path: Path, content: str) -> None:
        self._reporter.log(f"[DRY RUN] Would write {path}", bytes=len(content.encode("utf-8")))

    def copy_file(self, source: Path, destination: Path) -> None:
        if not source.exists():
            raise FileNotFoundError(f"Cannot copy missing file: {source}")
        self._reporter.log(f"[DRY RUN] Would copy {source} -> {destination}")
