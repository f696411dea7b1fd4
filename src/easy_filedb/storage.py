"""
Pure storage layer for file and directory operations.

Directory creation and removal are best-effort and never raise; their
failures go to the configured logger. File reads, writes and deletes
propagate the underlying OSError unchanged.
"""

import logging
import os
from typing import List, Optional

from .models import DirectoryEntry, WriteMode


class Storage:
    """Thin wrapper over filesystem primitives without business logic."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize with an optional diagnostic logger."""
        self.logger = logger or logging.getLogger(__name__)

    def create_directory(self, path: str) -> None:
        """Create a single directory level, suppressing every failure."""
        try:
            os.mkdir(path)
            self.logger.debug("Created directory %s", path)
        except FileExistsError:
            self.logger.debug("Directory already exists: %s", path)
        except OSError as e:
            self.logger.warning("Failed to create directory %s: %s", path, e)

    def remove_directory(self, path: str) -> None:
        """Remove a directory and everything it contains.

        Absent paths are a no-op. A child that cannot be removed is logged
        and skipped so its siblings are still removed. Failures are
        logged, never raised.
        """
        try:
            entries = self.list_entries(path)
        except FileNotFoundError:
            self.logger.debug("Directory does not exist: %s", path)
            return
        except OSError as e:
            self.logger.warning("Failed to list directory %s: %s", path, e)
            return

        for entry in entries:
            if os.path.isdir(entry.full_path) and not os.path.islink(
                entry.full_path
            ):
                self.remove_directory(entry.full_path)
                continue
            try:
                self.delete_file(entry.full_path)
            except OSError as e:
                self.logger.warning(
                    "Failed to delete file %s: %s", entry.full_path, e
                )

        try:
            os.rmdir(path)
            self.logger.debug("Removed directory %s", path)
        except OSError as e:
            self.logger.warning("Failed to remove directory %s: %s", path, e)

    def list_entries(self, path: str) -> List[DirectoryEntry]:
        """List immediate children of a directory in listing order.

        Raises the OSError from os.listdir when the path does not exist.
        """
        return [
            DirectoryEntry(
                name=name,
                base_name=os.path.splitext(name)[0],
                full_path=os.path.join(path, name),
            )
            for name in os.listdir(path)
        ]

    def read_file(self, path: str) -> bytes:
        """Read a file as bytes."""
        with open(path, "rb") as f:
            return f.read()

    def write_file(
        self,
        path: str,
        data: bytes,
        mode: WriteMode = WriteMode.OVERWRITE,
    ) -> None:
        """Write bytes to a file.

        WriteMode.EXCLUSIVE raises FileExistsError if the file exists.
        """
        with open(path, mode.flag) as f:
            f.write(data)

    def delete_file(self, path: str) -> None:
        """Delete a file."""
        os.remove(path)
