"""Ephemeral on-disk projects for testing tools that operate on project trees."""

__version__ = "0.2.0"

from ephemeral.builder import Builder, BuilderError, GenericBuilder, RustBuilder
from ephemeral.filesystem import RealFileSystem, mkdir, mkdir_p
from ephemeral.manifest import MANIFEST_FILENAME, Config, Edition, Manifest, ManifestError
from ephemeral.project import Project, TeardownError
from ephemeral.protocols import FileSystem
from ephemeral.types import Dir, File

__all__ = [
    "__version__",
    "MANIFEST_FILENAME",
    "Builder",
    "BuilderError",
    "Config",
    "Dir",
    "Edition",
    "File",
    "FileSystem",
    "GenericBuilder",
    "Manifest",
    "ManifestError",
    "Project",
    "RealFileSystem",
    "RustBuilder",
    "TeardownError",
    "mkdir",
    "mkdir_p",
]
