"""Installed-version store.

An installed version is nothing more than a directory named after the version
under its candidate directory.
"""

from __future__ import annotations

from pathlib import Path

from .errors import VersionNotInstalledError
from .layout import CURRENT_DIR, SdkLayout


def version_path(root: Path, candidate: str, version: str) -> Path:
    """Compose the path of an installed version without touching the filesystem."""

    return SdkLayout(root).version_dir(candidate, version)


def installed_versions(root: Path, candidate: str) -> list[str]:
    """Return sorted names of installed version directories for a candidate.

    The `current` pointer and hidden entries are skipped; symlinked version
    directories other than `current` are reported like real ones.
    """

    candidate_dir = SdkLayout(root).candidate_dir(candidate)
    if not candidate_dir.is_dir():
        return []
    return sorted(
        entry.name
        for entry in candidate_dir.iterdir()
        if entry.name != CURRENT_DIR
        and not entry.name.startswith(".")
        and entry.is_dir()
    )


def _is_plain_version_name(version: str) -> bool:
    """Return whether `version` names a single entry directly under the candidate."""

    if version in {"", ".", "..", CURRENT_DIR}:
        return False
    return Path(version).name == version and "\\" not in version


def validate_installed(
    root: Path, candidate: str, version: str, operation: str = "store"
) -> Path:
    """Return the version path when it exists as a directory.

    The check is advisory: the directory may disappear before the caller uses it.
    """

    path = version_path(root, candidate, version)
    if not _is_plain_version_name(version) or not path.is_dir():
        raise VersionNotInstalledError(
            operation=operation,
            candidate=candidate,
            version=version,
            installed=installed_versions(root, candidate),
        )
    return path
