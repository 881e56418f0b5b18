"""Filesystem abstraction for testability.

This module provides the production filesystem used to materialize
projects. RealFileSystem wraps standard library Path and shutil
operations; the module-level helpers expose the two directory
creation primitives directly.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def mkdir_p(path: str | os.PathLike[str]) -> None:
    """Create a directory and any missing parents.

    Succeeds silently when the directory already exists.

    Raises:
        FileExistsError: If the path exists and is not a directory.
        NotADirectoryError: If an ancestor exists and is not a directory.
        PermissionError: If creation is not permitted.
    """
    Path(path).mkdir(parents=True, exist_ok=True)


def mkdir(path: str | os.PathLike[str]) -> None:
    """Create a single directory whose parent must already exist.

    Raises:
        FileNotFoundError: If the parent directory is missing.
        FileExistsError: If the path already exists.
    """
    Path(path).mkdir()


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def mkdir_p(self, path: Path) -> None:
        """Create a directory and all missing ancestors."""
        mkdir_p(path)

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Create or truncate a file and write content to it."""
        path.write_bytes(content)

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)
