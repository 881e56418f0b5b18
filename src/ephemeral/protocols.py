"""Protocol definitions for filesystem access.

Builders and projects talk to the disk only through the FileSystem
protocol defined here. Designing to this interface enables:
- Materialization and teardown without real I/O in unit tests
- Recording the exact order of side effects with a test double

Concrete implementations satisfy the protocol structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access to enable testing without real I/O.
    Implementations handle directory creation, file writes and recursive removal.
    """

    def mkdir_p(self, path: Path) -> None:
        """Create a directory and all missing ancestors.

        Args:
            path: Directory to create.

        Raises:
            OSError: If a component exists as a non-directory or permission is denied.
        """
        ...

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Create or truncate a file and write content to it.

        Args:
            path: Path to the file.
            content: Bytes to write.
        """
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree.

        Args:
            path: Path to remove.
        """
        ...
