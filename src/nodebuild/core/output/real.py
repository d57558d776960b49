"""Real output writer using the local file system."""

import logging
import shutil
from pathlib import Path

from nodebuild.core.output.abc import OutputWriter

logger = logging.getLogger(__name__)


class RealOutputWriter(OutputWriter):
    """Production implementation that writes synchronously to disk."""

    def write_text(self, path: Path, content: str) -> None:
        """Write content to path, creating parent directories as needed."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %d characters to %s", len(content), path)

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy source to destination, creating parent directories as needed."""
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
        logger.debug("Copied %s -> %s", source, destination)
