"""Unit tests for installed-version path composition and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from sdkswitch.errors import VersionNotInstalledError
from sdkswitch.store import installed_versions, validate_installed, version_path


def test_version_path_is_pure_composition(tmp_path: Path) -> None:
    """Composition should not require anything to exist on disk."""

    path = version_path(tmp_path, "java", "17.0.9-tem")

    assert path == tmp_path / "candidates" / "java" / "17.0.9-tem"
    assert not path.exists()


def test_validate_installed_returns_existing_directory(scala_root: Path) -> None:
    path = validate_installed(scala_root, "scala", "0.0.1")

    assert path == scala_root / "candidates" / "scala" / "0.0.1"


def test_validate_installed_reports_missing_version_with_installed_hint(
    scala_root: Path,
) -> None:
    with pytest.raises(
        VersionNotInstalledError, match="scala 0.0.3 is not installed on your system."
    ) as exc_info:
        validate_installed(scala_root, "scala", "0.0.3")

    assert exc_info.value.hint == "Installed scala versions: 0.0.1, 0.0.2."
    assert exc_info.value.candidate == "scala"
    assert exc_info.value.version == "0.0.3"


def test_validate_installed_rejects_regular_files(scala_root: Path) -> None:
    (scala_root / "candidates" / "scala" / "notes.txt").write_text("x", encoding="utf-8")

    with pytest.raises(VersionNotInstalledError):
        validate_installed(scala_root, "scala", "notes.txt")


@pytest.mark.parametrize("version", ["current", "..", ".", "0.0.1/bin", ""])
def test_validate_installed_rejects_names_outside_the_candidate(
    scala_root: Path, version: str
) -> None:
    """Only a plain version directory name counts as installed."""

    with pytest.raises(VersionNotInstalledError):
        validate_installed(scala_root, "scala", version)


def test_installed_versions_skips_current_and_hidden_entries(scala_root: Path) -> None:
    candidate_dir = scala_root / "candidates" / "scala"
    (candidate_dir / ".staging").mkdir()

    assert installed_versions(scala_root, "scala") == ["0.0.1", "0.0.2"]


def test_installed_versions_is_empty_for_unknown_candidate(tmp_path: Path) -> None:
    assert installed_versions(tmp_path, "groovy") == []
