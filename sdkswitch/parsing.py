"""Shared parsing helpers for manifest and environment value normalization."""

from __future__ import annotations


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_candidate_names(raw_text: str) -> frozenset[str]:
    """Parse comma-separated candidate names, dropping blank entries.

    Order and duplicates are not significant, so the result is a set.
    """

    names: set[str] = set()
    for field in raw_text.split(","):
        name = normalize_optional_string(field)
        if name is not None:
            names.add(name)
    return frozenset(names)
