"""Current-pointer switching.

Responsibilities:
- Remove an existing `current` entry, whatever shape it has.
- Repoint `current` at an installed version with a directory symlink.
- Fall back to copying the version tree into place when symlinks are unavailable.

Key types:
- `SwitchResult`: outcome of one switch.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import shutil
import tempfile

from .errors import SwitchIOError
from .layout import SdkLayout
from .telemetry.logger import RunLogger


OUTCOME_SYMLINKED = "symlinked"
OUTCOME_COPIED_FALLBACK = "copied_fallback"


@dataclass(frozen=True, slots=True)
class SwitchResult:
    """Outcome of repointing a candidate's `current` entry.

    Attributes:
        candidate: Candidate name.
        version: Version now selected.
        outcome: `symlinked` or `copied_fallback`.
        current_path: Location of the `current` entry.
    """

    candidate: str
    version: str
    outcome: str
    current_path: Path

    @property
    def copied(self) -> bool:
        return self.outcome == OUTCOME_COPIED_FALLBACK


def _create_directory_link(target: Path, link: Path) -> None:
    """Create a directory symbolic link at `link` pointing at `target`."""

    os.symlink(target, link, target_is_directory=True)


def _remove_symlink(path: Path) -> None:
    """Remove the symbolic link at `path` without touching its target."""

    try:
        os.unlink(path)
    except OSError:
        if os.name != "nt":
            raise
        # Windows directory links are removed with rmdir.
        os.rmdir(path)


def remove_current_pointer(path: Path, candidate: str, operation: str = "default") -> bool:
    """Remove a `current` entry and return whether one existed.

    Tries symlink removal first, then removes a real directory tree or file.

    Raises:
        SwitchIOError: If the entry cannot be removed.
    """

    if not os.path.lexists(path):
        return False

    try:
        if path.is_symlink():
            _remove_symlink(path)
        elif path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise SwitchIOError(
            operation=operation,
            detail=f"cannot remove current directory for {candidate}: {exc}",
            hint=f"Check permissions on `{path}` and retry.",
        ) from exc
    return True


def _copy_into_place(
    layout: SdkLayout,
    candidate: str,
    version: str,
    source: Path,
    current_path: Path,
) -> None:
    """Copy `source` into a scratch area under `tmp/`, then rename it to `current`."""

    try:
        layout.tmp_dir.mkdir(parents=True, exist_ok=True)
        staging_root = Path(
            tempfile.mkdtemp(prefix=f"{candidate}-{version}-", dir=layout.tmp_dir)
        )
    except OSError as exc:
        raise SwitchIOError(
            operation="default",
            detail=f"cannot prepare tmp folder for {candidate} {version}: {exc}",
            hint=f"Check that `{layout.tmp_dir}` is writable.",
        ) from exc

    staged_path = staging_root / version
    try:
        shutil.copytree(source, staged_path, symlinks=True)
        os.rename(staged_path, current_path)
    except OSError as exc:
        raise SwitchIOError(
            operation="default",
            detail=f"cannot copy {candidate} {version} into place as current: {exc}",
            hint="Free disk space or enable symbolic links on this filesystem.",
        ) from exc
    finally:
        shutil.rmtree(staging_root, ignore_errors=True)


def set_current(
    root: Path,
    candidate: str,
    version: str,
    run_logger: RunLogger | None = None,
) -> SwitchResult:
    """Point `current` for `candidate` at `version`.

    The candidate and version must already be validated. The old entry is
    removed before the new one is created, so a concurrent reader sees either
    no pointer or a complete one.
    """

    layout = SdkLayout(root)
    source = layout.version_dir(candidate, version)
    current_path = layout.current_path(candidate)

    remove_current_pointer(current_path, candidate)

    try:
        _create_directory_link(source, current_path)
    except (OSError, NotImplementedError) as exc:
        if run_logger is not None:
            run_logger.log_warning(
                "default",
                "symlink-unavailable",
                candidate=candidate,
                version=version,
                error_type=type(exc).__name__,
            )
        _copy_into_place(layout, candidate, version, source, current_path)
        return SwitchResult(
            candidate=candidate,
            version=version,
            outcome=OUTCOME_COPIED_FALLBACK,
            current_path=current_path,
        )

    return SwitchResult(
        candidate=candidate,
        version=version,
        outcome=OUTCOME_SYMLINKED,
        current_path=current_path,
    )
