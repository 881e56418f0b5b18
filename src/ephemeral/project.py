"""In-memory project trees and their teardown."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import TracebackType

from ephemeral.filesystem import RealFileSystem
from ephemeral.protocols import FileSystem
from ephemeral.types import Dir

logger = logging.getLogger(__name__)


class TeardownError(RuntimeError):
    """A project root could not be removed.

    Raised by Project.clear(). A leaked fixture is a defect in the test
    environment, so callers should let this propagate rather than catch it.
    """

    pass


class Project:
    """A project created on the filesystem at a caller-chosen location.

    The project holds a flat, ordered list of Dirs. The first Dir is the
    root, created automatically at the project path; nested directories are
    added as further Dirs whose path names their parent.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        filesystem: FileSystem | None = None,
    ) -> None:
        """Initialize a project with only its root directory.

        Args:
            path: Root directory of the project.
            filesystem: Filesystem used for teardown. Defaults to RealFileSystem.
        """
        self.path = Path(path)
        self.fs = filesystem if filesystem is not None else RealFileSystem()
        self._dirs: list[Dir] = [Dir(self.path)]
        self._cleared = False

    def __repr__(self) -> str:
        return f"Project(path={self.path!r}, dirs={len(self._dirs)})"

    @property
    def root(self) -> Dir:
        """The root Dir, always at the project path."""
        return self._dirs[0]

    @property
    def dirs(self) -> tuple[Dir, ...]:
        """All Dirs in materialization order, root first."""
        return tuple(self._dirs)

    def add_dir(self, dir: Dir) -> Project:
        """Append a Dir to the project.

        Args:
            dir: Directory to add. Its path should lie under the project root.
                A copy is stored, so later changes to dir are not picked up.

        Returns:
            This Project, for chaining.

        Raises:
            TeardownError: If the project has already been cleared.
        """
        self._ensure_not_cleared()
        self._dirs.append(dir.copy())
        return self

    def clear(self) -> None:
        """Delete the project root and everything beneath it.

        Raises:
            TeardownError: If the root cannot be removed or was already cleared.
        """
        self._ensure_not_cleared()
        root = self._dirs[0].path
        try:
            self.fs.rmtree(root)
        except OSError as e:
            raise TeardownError(f"Can't delete project directory {root}: {e}") from e
        finally:
            self._cleared = True
        logger.debug("Removed project at %s", root)

    def _ensure_not_cleared(self) -> None:
        if self._cleared:
            raise TeardownError(f"Project at {self.path} has already been cleared")

    def __enter__(self) -> Project:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.clear()
