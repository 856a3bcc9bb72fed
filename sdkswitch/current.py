"""Current-pointer inspection and resolution.

Responsibilities:
- Classify the `current` entry of a candidate into one explicit state.
- Resolve the active version name from that state.

Key types:
- `CurrentPointer`: tagged snapshot of the `current` entry.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from .errors import PointerInspectionError
from .layout import SdkLayout
from .telemetry.logger import RunLogger


POINTER_ABSENT = "absent"
POINTER_LINKED = "linked"
POINTER_BROKEN = "broken"
POINTER_FALLBACK = "fallback"
POINTER_UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True, slots=True)
class CurrentPointer:
    """Snapshot of a candidate's `current` entry.

    Attributes:
        kind: One of `absent`, `linked`, `broken`, `fallback`, `unrecognized`.
        path: Location of the `current` entry.
        target: Raw symbolic-link target for `linked` and `broken` pointers.
    """

    kind: str
    path: Path
    target: Path | None = None

    @property
    def is_link(self) -> bool:
        """Return whether the pointer is a symbolic link, usable or not."""

        return self.kind in {POINTER_LINKED, POINTER_BROKEN}

    def resolved_target(self) -> Path | None:
        """Return the link target joined onto the candidate directory.

        Absolute targets are returned unchanged by the join.
        """

        if self.target is None:
            return None
        return self.path.parent / self.target


def inspect_current(
    root: Path, candidate: str, operation: str = "current"
) -> CurrentPointer:
    """Classify the `current` entry for `candidate` without mutating anything.

    Raises:
        PointerInspectionError: If the entry cannot be examined, e.g. when the
            candidate directory is not searchable.
    """

    layout = SdkLayout(root)
    try:
        return _classify(layout.candidate_dir(candidate), layout.current_path(candidate))
    except OSError as exc:
        raise PointerInspectionError(
            operation=operation,
            detail=f"cannot inspect current entry for {candidate}: {exc}",
            hint=f"Check permissions on `{layout.candidate_dir(candidate)}`.",
        ) from exc


def _classify(candidate_dir: Path, current_path: Path) -> CurrentPointer:
    if not candidate_dir.is_dir():
        return CurrentPointer(kind=POINTER_ABSENT, path=current_path)

    if current_path.is_symlink():
        try:
            target = Path(os.readlink(current_path))
        except OSError:
            return CurrentPointer(kind=POINTER_BROKEN, path=current_path)
        kind = POINTER_LINKED if current_path.exists() else POINTER_BROKEN
        return CurrentPointer(kind=kind, path=current_path, target=target)

    if current_path.is_dir():
        return CurrentPointer(kind=POINTER_FALLBACK, path=current_path)
    if os.path.lexists(current_path):
        return CurrentPointer(kind=POINTER_UNRECOGNIZED, path=current_path)
    return CurrentPointer(kind=POINTER_ABSENT, path=current_path)


def version_name(pointer: CurrentPointer) -> str | None:
    """Return the version name a pointer denotes, if any.

    A link yields the last component of its raw target. A plain directory
    yields its own name, which is the literal `current`.
    """

    if pointer.kind == POINTER_LINKED and pointer.target is not None:
        return pointer.target.name or None
    if pointer.kind == POINTER_FALLBACK:
        return pointer.path.name
    return None


def resolve_current(
    root: Path, candidate: str, run_logger: RunLogger | None = None
) -> str | None:
    """Return the active version name for `candidate`, or `None`."""

    pointer = inspect_current(root, candidate)
    if pointer.kind == POINTER_BROKEN and run_logger is not None:
        run_logger.log_warning(
            "current",
            "broken-current-link",
            candidate=candidate,
            target=pointer.target or "unreadable",
        )
    return version_name(pointer)
