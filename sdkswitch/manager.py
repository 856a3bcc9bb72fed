"""Operation facade for sdkswitch.

Responsibilities:
- Thread one explicit `SdkConfig` through every core operation.
- Validate candidates and versions before any filesystem mutation.
- Emit start/complete/failure telemetry events per operation.

Key types:
- `CandidateManager`: entry point used by the CLI and by library callers.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from .config import SdkConfig
from .current import resolve_current
from .errors import NoCurrentVersionError
from .guard import UninstallResult, guarded_remove
from .registry import list_candidates, validate_candidate
from .store import validate_installed
from .switcher import SwitchResult, set_current
from .telemetry.logger import RunLogger

_OperationResult = TypeVar("_OperationResult")


class CandidateManager:
    """Coordinate candidate operations against one state root."""

    def __init__(self, config: SdkConfig, run_logger: RunLogger | None = None) -> None:
        """Bind the manager to a validated config and optional logger."""

        config.validate()
        self._config = config
        self._run_logger = run_logger

    @property
    def root(self) -> Path:
        return self._config.root_dir

    def known_candidates(self) -> frozenset[str]:
        """Return the candidate names listed in the manifest."""

        return list_candidates(self.root)

    def set_default(self, candidate: str, version: str) -> SwitchResult:
        """Make an installed version the current one for its candidate."""

        def _switch() -> SwitchResult:
            validate_candidate(self.known_candidates(), candidate, operation="default")
            validate_installed(self.root, candidate, version, operation="default")
            return set_current(self.root, candidate, version, run_logger=self._run_logger)

        return self._run_operation("default", _switch, candidate=candidate, version=version)

    def current_version(self, candidate: str) -> str:
        """Return the current version of one candidate or raise when none is set."""

        def _resolve() -> str:
            validate_candidate(self.known_candidates(), candidate, operation="current")
            version = resolve_current(self.root, candidate, run_logger=self._run_logger)
            if version is None:
                raise NoCurrentVersionError(operation="current", candidate=candidate)
            return version

        return self._run_operation("current", _resolve, candidate=candidate)

    def current_versions(self) -> list[tuple[str, str]]:
        """Return `(candidate, version)` rows for every candidate in use, by name."""

        def _collect() -> list[tuple[str, str]]:
            rows: list[tuple[str, str]] = []
            for candidate in sorted(self.known_candidates()):
                version = resolve_current(self.root, candidate, run_logger=self._run_logger)
                if version is not None:
                    rows.append((candidate, version))
            return rows

        return self._run_operation("current", _collect)

    def uninstall(self, candidate: str, version: str, force: bool = False) -> UninstallResult:
        """Remove an installed version, guarding the current one."""

        return self._run_operation(
            "uninstall",
            lambda: guarded_remove(
                self.root, candidate, version, force=force, run_logger=self._run_logger
            ),
            candidate=candidate,
            version=version,
            force=force,
        )

    def home(self, candidate: str, version: str) -> Path:
        """Return the absolute directory of an installed version."""

        def _locate() -> Path:
            validate_candidate(self.known_candidates(), candidate, operation="home")
            return validate_installed(self.root, candidate, version, operation="home")

        return self._run_operation("home", _locate, candidate=candidate, version=version)

    def _run_operation(
        self,
        operation: str,
        action: Callable[[], _OperationResult],
        **context: object,
    ) -> _OperationResult:
        """Run one named operation and emit start/complete/failure telemetry events."""

        if self._run_logger is not None:
            self._run_logger.log_operation_start(operation, **context)
        try:
            result = action()
        except Exception as exc:
            if self._run_logger is not None:
                self._run_logger.log_operation_failure(operation, type(exc).__name__)
            raise
        if self._run_logger is not None:
            self._run_logger.log_operation_complete(operation, **context)
        return result
