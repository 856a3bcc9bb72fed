"""Uninstall guard for installed candidate versions.

Responsibilities:
- Refuse to remove the version the `current` pointer selects unless forced.
- Clear the pointer before removing a forced current version.
- Never let an unreadable pointer block cleanup of a version directory.

Key types:
- `UninstallResult`: outcome of one guarded removal.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import shutil

from .current import (
    POINTER_ABSENT,
    POINTER_LINKED,
    CurrentPointer,
    inspect_current,
)
from .errors import CurrentVersionProtectedError, UninstallIOError
from .registry import list_candidates, validate_candidate
from .store import validate_installed
from .switcher import remove_current_pointer
from .telemetry.logger import RunLogger


@dataclass(frozen=True, slots=True)
class UninstallResult:
    """Outcome of a guarded uninstall.

    Attributes:
        candidate: Candidate name.
        version: Removed version.
        removed_path: Version directory that was deleted.
        pointer_cleared: Whether the `current` pointer was removed first.
    """

    candidate: str
    version: str
    removed_path: Path
    pointer_cleared: bool = False


def _same_location(left: Path, right: Path) -> bool:
    """Return whether two paths denote the same directory entry."""

    if os.path.normpath(left) == os.path.normpath(right):
        return True
    try:
        return os.path.samefile(left, right)
    except OSError:
        return False


def points_at(pointer: CurrentPointer, version_dir: Path) -> bool:
    """Return whether a readable `current` link selects `version_dir`."""

    if pointer.kind != POINTER_LINKED:
        return False
    resolved = pointer.resolved_target()
    if resolved is None:
        return False
    return _same_location(resolved, version_dir)


def guarded_remove(
    root: Path,
    candidate: str,
    version: str,
    force: bool = False,
    run_logger: RunLogger | None = None,
) -> UninstallResult:
    """Remove an installed version unless it is the current one.

    Raises:
        InvalidCandidateError: If the candidate is unknown.
        VersionNotInstalledError: If the version directory does not exist.
        CurrentVersionProtectedError: If the version is current and `force` is false.
        SwitchIOError: If a forced removal cannot clear the pointer.
        UninstallIOError: If the version directory cannot be removed.
    """

    validate_candidate(list_candidates(root), candidate, operation="uninstall")
    version_dir = validate_installed(root, candidate, version, operation="uninstall")

    pointer = inspect_current(root, candidate, operation="uninstall")
    pointer_cleared = False
    if points_at(pointer, version_dir):
        if not force:
            raise CurrentVersionProtectedError(
                operation="uninstall", candidate=candidate, version=version
            )
        pointer_cleared = remove_current_pointer(
            pointer.path, candidate, operation="uninstall"
        )
    elif pointer.kind not in {POINTER_ABSENT, POINTER_LINKED} and run_logger is not None:
        run_logger.log_warning(
            "uninstall",
            f"current-{pointer.kind}",
            candidate=candidate,
            target=pointer.target or pointer.path,
        )

    try:
        if version_dir.is_symlink():
            # Local installs link to a directory the tool does not own.
            os.unlink(version_dir)
        else:
            shutil.rmtree(version_dir)
    except OSError as exc:
        raise UninstallIOError(
            operation="uninstall",
            detail=f"could not delete directory {version_dir}: {exc}",
            hint="Check permissions on the version directory and retry.",
        ) from exc

    return UninstallResult(
        candidate=candidate,
        version=version,
        removed_path=version_dir,
        pointer_cleared=pointer_cleared,
    )
