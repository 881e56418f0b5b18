"""Typed Cargo manifest model and its TOML serialization."""

from __future__ import annotations

import tomllib
from enum import Enum
from typing import Annotated, Any

import semver
import tomli_w
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    ValidationError,
    field_validator,
)

# File name the manifest is written to in the project root
MANIFEST_FILENAME = "Cargo.toml"


class ManifestError(ValueError):
    """A manifest could not be constructed or encoded."""

    pass


def _parse_version(value: Any) -> Any:
    if isinstance(value, str):
        return semver.Version.parse(value)
    return value


Version = Annotated[
    semver.Version,
    BeforeValidator(_parse_version),
    PlainSerializer(str, return_type=str),
]


class Edition(str, Enum):
    """Supported Rust editions, serialized as their year."""

    EDITION_2015 = "2015"
    EDITION_2018 = "2018"

    @classmethod
    def latest(cls) -> Edition:
        """Get the newest supported edition."""
        return cls.EDITION_2018


class Config(BaseModel):
    """The ``[package]`` section of a manifest."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    name: str = ""
    version: Version = Field(default_factory=lambda: semver.Version(0, 0, 0))
    authors: list[str] = Field(default_factory=list)
    edition: Edition = Field(default_factory=Edition.latest)

    @field_validator("edition", mode="before")
    @classmethod
    def default_edition(cls, value: Any) -> Any:
        return Edition.latest() if value is None else value

    @classmethod
    def create(
        cls,
        name: str,
        version: str,
        authors: list[str] | tuple[str, ...] = (),
        edition: Edition | None = None,
    ) -> Config:
        """Create a package config from plain values.

        Args:
            name: Package name.
            version: Semantic version string, e.g. ``0.1.0``.
            authors: Author strings, kept in order.
            edition: Rust edition. Defaults to the latest edition.

        Returns:
            Validated Config.

        Raises:
            ManifestError: If the version is not a valid semantic version.
        """
        try:
            return cls(name=name, version=version, authors=list(authors), edition=edition)
        except ValidationError as e:
            raise ManifestError(f"Invalid package config: {e}") from e


class Manifest(BaseModel):
    """A Cargo.toml document: package metadata plus optional dependencies."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    package: Config = Field(default_factory=Config)
    dependencies: dict[str, Version] | None = None

    @classmethod
    def create(
        cls,
        name: str,
        version: str,
        authors: list[str] | tuple[str, ...] = (),
        edition: Edition | None = None,
        dependencies: dict[str, str | semver.Version] | None = None,
    ) -> Manifest:
        """Create a manifest from plain values.

        Args:
            name: Package name.
            version: Semantic version string of the package.
            authors: Author strings, kept in order.
            edition: Rust edition. Defaults to the latest edition.
            dependencies: Mapping of crate name to version. None omits the
                ``[dependencies]`` section.

        Returns:
            Validated Manifest.

        Raises:
            ManifestError: If any version string is invalid.
        """
        package = Config.create(name, version, authors, edition)
        try:
            return cls(package=package, dependencies=dependencies)
        except ValidationError as e:
            raise ManifestError(f"Invalid dependencies: {e}") from e

    @classmethod
    def from_toml(cls, text: str) -> Manifest:
        """Parse a manifest previously produced by to_toml().

        Raises:
            ManifestError: If the text is not valid TOML or not a manifest.
        """
        try:
            return cls.model_validate(tomllib.loads(text))
        except (tomllib.TOMLDecodeError, ValidationError) as e:
            raise ManifestError(f"Invalid manifest: {e}") from e

    def to_toml(self) -> str:
        """Serialize the manifest as TOML text.

        The ``[dependencies]`` table is left out entirely when dependencies
        is None.

        Raises:
            ManifestError: If a value cannot be represented in TOML.
        """
        try:
            data = self.model_dump(mode="json", exclude_none=True)
            return tomli_w.dumps(data)
        except (TypeError, ValueError) as e:
            raise ManifestError(f"Can't encode manifest: {e}") from e

    def to_bytes(self) -> bytes:
        """Serialize the manifest as UTF-8 encoded TOML.

        Raises:
            ManifestError: If the manifest holds text that is not valid UTF-8.
        """
        text = self.to_toml()
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ManifestError(f"Manifest is not valid UTF-8: {e}") from e
