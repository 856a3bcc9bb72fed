"""On-disk layout of the version-manager state tree.

Responsibilities:
- Compose every path the core reads or mutates from a single root directory.
- Keep the tree bit-compatible with the conventional layout:

    <root>/var/candidates
    <root>/candidates/<candidate>/<version>/
    <root>/candidates/<candidate>/current
    <root>/tmp/
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


VAR_DIR = "var"
CANDIDATES_FILE = "candidates"
CANDIDATES_DIR = "candidates"
CURRENT_DIR = "current"
TMP_DIR = "tmp"


@dataclass(frozen=True, slots=True)
class SdkLayout:
    """Pure path composition rooted at the state directory.

    No method touches the filesystem.
    """

    root: Path

    @property
    def manifest_path(self) -> Path:
        return self.root / VAR_DIR / CANDIDATES_FILE

    @property
    def candidates_dir(self) -> Path:
        return self.root / CANDIDATES_DIR

    @property
    def tmp_dir(self) -> Path:
        return self.root / TMP_DIR

    def candidate_dir(self, candidate: str) -> Path:
        return self.candidates_dir / candidate

    def version_dir(self, candidate: str, version: str) -> Path:
        return self.candidate_dir(candidate) / version

    def current_path(self, candidate: str) -> Path:
        return self.candidate_dir(candidate) / CURRENT_DIR
