"""Domain exceptions for candidate operations and CLI diagnostics.

Every failure raised by the core carries the operation it belongs to, a
user-facing detail line, and an optional hint. The CLI boundary is the only
place that turns these into exit codes.
"""

from __future__ import annotations


class SdkCommandError(RuntimeError):
    """Raised when a candidate operation fails in a user-correctable way."""

    def __init__(
        self,
        *,
        operation: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize an operation-scoped error."""

        super().__init__(detail)
        self.operation = operation
        self.detail = detail
        self.hint = hint


class RootDirectoryError(SdkCommandError):
    """Raised when the state root directory cannot be determined."""


class ConfigMissingError(SdkCommandError):
    """Raised when the candidates manifest is absent or unreadable."""


class ConfigEmptyError(SdkCommandError):
    """Raised when the candidates manifest exists but has blank content."""


class InvalidCandidateError(SdkCommandError):
    """Raised when a candidate name is not listed in the manifest."""

    def __init__(self, *, operation: str, candidate: str) -> None:
        super().__init__(
            operation=operation,
            detail=f"{candidate} is not a valid candidate.",
            hint="Check the candidate name against `<root>/var/candidates`.",
        )
        self.candidate = candidate


class VersionNotInstalledError(SdkCommandError):
    """Raised when a candidate version directory does not exist."""

    def __init__(
        self,
        *,
        operation: str,
        candidate: str,
        version: str,
        installed: list[str] | None = None,
    ) -> None:
        hint = None
        if installed:
            hint = f"Installed {candidate} versions: {', '.join(installed)}."
        super().__init__(
            operation=operation,
            detail=f"{candidate} {version} is not installed on your system.",
            hint=hint,
        )
        self.candidate = candidate
        self.version = version


class CurrentVersionProtectedError(SdkCommandError):
    """Raised when uninstalling the active version without the force override."""

    def __init__(self, *, operation: str, candidate: str, version: str) -> None:
        super().__init__(
            operation=operation,
            detail=(
                f"{candidate} {version} is the current version and should not be removed."
            ),
            hint="Override with `--force`, but leaves the candidate unusable!",
        )
        self.candidate = candidate
        self.version = version


class NoCurrentVersionError(SdkCommandError):
    """Raised when a candidate has no resolvable current version."""

    def __init__(self, *, operation: str, candidate: str) -> None:
        super().__init__(
            operation=operation,
            detail=f"No current version of {candidate} configured.",
            hint=f"Select one with `sdkswitch default {candidate} <version>`.",
        )
        self.candidate = candidate


class SwitchIOError(SdkCommandError):
    """Raised when removing or creating the current pointer fails."""


class UninstallIOError(SdkCommandError):
    """Raised when removing an installed version directory fails."""


class PointerInspectionError(SdkCommandError):
    """Raised when the `current` entry of a candidate cannot be examined."""
