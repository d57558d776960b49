"""Output operations interface for build artifacts.

Follows the ops pattern: an ABC for dependency injection, a real implementation
that touches the file system, and a dry-run implementation that only reports.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class OutputWriter(ABC):
    """Abstract interface for writing build artifacts.

    Every method completes its write before returning. Callers can rely on
    the file being on disk once the call returns without raising.
    """

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write text content to path, creating or overwriting the file.

        Args:
            path: Destination file path
            content: Text to write (UTF-8)

        Raises:
            OSError: If the file cannot be written
        """
        ...

    @abstractmethod
    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy a file byte-for-byte, creating or overwriting the destination.

        Args:
            source: Existing file to copy
            destination: Destination file path

        Raises:
            FileNotFoundError: If source does not exist
            OSError: If the destination cannot be written
        """
        ...
