"""Shared data types for in-memory project trees."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

__all__ = ["Dir", "File"]


@dataclass(frozen=True)
class File:
    """A file to be written when a project is built.

    Attributes:
        path: Location of the file. Relative paths are resolved by the owning Dir.
        contents: Exact bytes written to the file.
    """

    path: Path
    contents: bytes = b""

    def __post_init__(self) -> None:
        """Normalize path and contents."""
        object.__setattr__(self, "path", Path(self.path))
        object.__setattr__(self, "contents", bytes(self.contents))


@dataclass
class Dir:
    """A directory and the files placed directly inside it.

    A Dir never holds other Dirs. Subdirectories are added to the Project
    as separate entries whose path names the parent, e.g. ``root/foo/bar``.
    """

    path: Path
    _files: list[File] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @property
    def files(self) -> tuple[File, ...]:
        """Files in the order they were added."""
        return tuple(self._files)

    def add_file(self, path: str | os.PathLike[str], contents: bytes | str) -> Dir:
        """Add a file to this directory.

        Args:
            path: File path. Relative paths are joined onto the Dir path;
                absolute paths are kept verbatim, even outside the Dir.
            contents: File contents. Text is encoded as UTF-8.

        Returns:
            This Dir, for chaining.
        """
        file_path = Path(path)
        if not file_path.is_absolute():
            file_path = self.path / file_path
        if isinstance(contents, str):
            contents = contents.encode("utf-8")

        self._files.append(File(file_path, contents))
        return self

    def copy(self) -> Dir:
        """Return an independent Dir with the same path and files."""
        clone = Dir(self.path)
        clone._files = list(self._files)
        return clone
