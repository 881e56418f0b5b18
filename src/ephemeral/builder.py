"""Builders that accumulate a project in memory and write it to disk.

Builder owns accumulation and the single materialization pass;
subclasses add what they put into the root Dir.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Self

from ephemeral.filesystem import RealFileSystem
from ephemeral.manifest import MANIFEST_FILENAME, Edition, Manifest
from ephemeral.project import Project
from ephemeral.protocols import FileSystem
from ephemeral.types import Dir

logger = logging.getLogger(__name__)


class BuilderError(RuntimeError):
    """A builder was used after build() consumed it."""

    pass


def materialize(project: Project, filesystem: FileSystem) -> None:
    """Write every Dir and File of a project to disk, in order.

    Not transactional: the first failure propagates and anything already
    created stays on disk. The root directory is always created first, so
    Project.clear() can clean up a partial build.

    Raises:
        OSError: If a directory or file cannot be created or written.
    """
    for dir in project.dirs:
        filesystem.mkdir_p(dir.path)
        logger.debug("Created directory %s", dir.path)
        for file in dir.files:
            filesystem.write_bytes(file.path, file.contents)
            logger.debug("Wrote %d bytes to %s", len(file.contents), file.path)


class Builder:
    """Base class for project builders.

    Accumulation methods return the builder for chaining and never touch
    the filesystem. build() is the only side-effecting step and can be
    called once.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        filesystem: FileSystem | None = None,
    ) -> None:
        """Initialize a builder around a fresh Project.

        Args:
            path: Root directory of the project.
            filesystem: Filesystem abstraction. Defaults to RealFileSystem.

        Note:
            Prefer using the factory method `create()` for construction.
        """
        self.path = Path(path)
        self.fs = filesystem if filesystem is not None else RealFileSystem()
        self._project = Project(self.path, filesystem=self.fs)
        self._built = False

    @classmethod
    def create(
        cls,
        path: str | os.PathLike[str],
        filesystem: FileSystem | None = None,
    ) -> Self:
        """Factory method for builder instantiation.

        Args:
            path: Root directory of the project.
            filesystem: Optional filesystem abstraction (created if not provided).

        Returns:
            Configured builder instance.
        """
        if filesystem is None:
            filesystem = RealFileSystem()
        return cls(path, filesystem=filesystem)

    @property
    def project(self) -> Project:
        """The project accumulated so far."""
        return self._project

    def add_dir(self, dir: Dir) -> Self:
        """Add a directory to the project.

        Args:
            dir: Directory to add. Nested directories name their parent in
                their path. A copy is stored.

        Returns:
            This builder, for chaining.
        """
        self._ensure_not_built()
        self._project.add_dir(dir)
        logger.debug("Added %s with %d file(s)", dir.path, len(dir.files))
        return self

    def build(self) -> Project:
        """Create every directory and file on disk.

        Returns:
            The materialized Project. Call clear() on it when done.

        Raises:
            BuilderError: If build() was already called.
            OSError: If any directory or file cannot be created.
        """
        self._ensure_not_built()
        self._built = True
        materialize(self._project, self.fs)
        logger.debug("Built project at %s", self.path)
        return self._project

    def _ensure_not_built(self) -> None:
        if self._built:
            raise BuilderError(f"Builder for {self.path} has already been built")


class GenericBuilder(Builder):
    """Builder for projects of any language; writes only what is added."""

    pass


class RustBuilder(Builder):
    """Builder for Rust projects that can generate a Cargo.toml."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        filesystem: FileSystem | None = None,
    ) -> None:
        """Initialize a Rust builder with a default manifest.

        Args:
            path: Root directory of the project.
            filesystem: Filesystem abstraction. Defaults to RealFileSystem.
        """
        super().__init__(path, filesystem)
        self.manifest = Manifest()

    def attach_manifest(self, manifest: Manifest | None = None) -> RustBuilder:
        """Serialize a manifest and add it to the project root.

        Serialization happens now, so encoding errors surface here rather
        than at build time.

        Args:
            manifest: Manifest to write as Cargo.toml. A copy is kept as the
                builder's manifest. None writes the builder's current manifest.

        Returns:
            This builder, for chaining.

        Raises:
            ManifestError: If the manifest cannot be encoded.
        """
        self._ensure_not_built()
        pending = self.manifest if manifest is None else manifest.model_copy(deep=True)
        contents = pending.to_bytes()
        self.manifest = pending
        self._project.root.add_file(MANIFEST_FILENAME, contents)
        logger.debug("Attached %s to %s", MANIFEST_FILENAME, self.path)
        return self

    def with_edition(self, edition: Edition) -> RustBuilder:
        """Set the edition of the in-progress manifest.

        A manifest that has already been attached is written as it was
        serialized; the new edition applies to the builder's manifest only.

        Returns:
            This builder, for chaining.
        """
        self._ensure_not_built()
        self.manifest.package.edition = edition
        return self
