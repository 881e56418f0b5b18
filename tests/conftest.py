"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ephemeral.manifest import Edition, Manifest


@pytest.fixture
def in_tmp_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with tmp_path as the working directory.

    Lets tests use relative project paths such as ``tmp2`` without
    touching the repository checkout.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Absolute root path for a project that does not exist yet."""
    return tmp_path / "project"


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock records every filesystem operation without touching real files.
    """
    return MagicMock()


# ============================================================================
# Sample Manifest Fixtures
# ============================================================================


@pytest.fixture
def sample_manifest() -> Manifest:
    """Manifest for a package named foo with no dependencies."""
    return Manifest.create(
        "foo",
        "0.1.0",
        ["foo <foo@bar.com>"],
        Edition.EDITION_2018,
    )


@pytest.fixture
def sample_manifest_with_deps() -> Manifest:
    """Manifest for a package named foo with two dependencies."""
    return Manifest.create(
        "foo",
        "0.1.0",
        ["foo <foo@bar.com>"],
        Edition.EDITION_2015,
        dependencies={"serde": "1.0.80", "rand": "0.6.0-alpha+build.5"},
    )
