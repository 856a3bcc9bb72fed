"""Shared pytest fixtures for the full sdkswitch test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.virtual_root import VirtualCandidate, build_virtual_root


@pytest.fixture(autouse=True)
def _isolate_root_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's real root and log level out of every test."""

    monkeypatch.delenv("SDKMAN_DIR", raising=False)
    monkeypatch.delenv("SDKSWITCH_LOG_LEVEL", raising=False)


@pytest.fixture
def scala_root(tmp_path: Path) -> Path:
    """Provide a root with `scala` 0.0.1 and 0.0.2 installed and 0.0.2 current."""

    return build_virtual_root(
        tmp_path / ".sdkman",
        [
            VirtualCandidate(
                name="scala",
                versions=("0.0.1", "0.0.2"),
                current_version="0.0.2",
            )
        ],
    )


@pytest.fixture
def multi_root(tmp_path: Path) -> Path:
    """Provide a root with several candidates, only some of them in use."""

    return build_virtual_root(
        tmp_path / ".sdkman",
        [
            VirtualCandidate(
                name="java",
                versions=("11.0.15-tem", "17.0.3-tem"),
                current_version="11.0.15-tem",
            ),
            VirtualCandidate(
                name="kotlin",
                versions=("1.6.21", "1.7.22"),
                current_version="1.7.22",
            ),
            VirtualCandidate(name="gradle", versions=("8.5",)),
        ],
    )
