"""Candidate registry backed by the `var/candidates` manifest."""

from __future__ import annotations

from pathlib import Path
from typing import AbstractSet

from .errors import ConfigEmptyError, ConfigMissingError, InvalidCandidateError
from .layout import SdkLayout
from .parsing import normalize_optional_string, parse_candidate_names


def list_candidates(root: Path) -> frozenset[str]:
    """Return the set of known candidate names.

    Raises:
        ConfigMissingError: If the manifest is absent, not a file, or unreadable.
        ConfigEmptyError: If the manifest content is blank.
    """

    manifest_path = SdkLayout(root).manifest_path
    if not manifest_path.is_file():
        raise ConfigMissingError(
            operation="candidates",
            detail=f"the candidates file is missing: {manifest_path}",
            hint="Restore `var/candidates` or point `SDKMAN_DIR` at a valid root.",
        )

    try:
        raw_text = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigMissingError(
            operation="candidates",
            detail=f"failed to read candidates file: {manifest_path} ({exc})",
            hint="Verify file permissions on `var/candidates`.",
        ) from exc

    if normalize_optional_string(raw_text) is None:
        raise ConfigEmptyError(
            operation="candidates",
            detail=f"the candidates file is empty: {manifest_path}",
            hint="Refresh candidate metadata so `var/candidates` lists known names.",
        )
    return parse_candidate_names(raw_text)


def validate_candidate(
    known: AbstractSet[str], name: str, operation: str = "candidates"
) -> str:
    """Return `name` when it is a known candidate, exact and case-sensitive."""

    if name not in known:
        raise InvalidCandidateError(operation=operation, candidate=name)
    return name
