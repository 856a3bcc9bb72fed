"""Top-level package for sdkswitch.

This package manages a local tree of installed SDK candidate versions and the
`current` pointer that selects the active one per candidate. The main entry
point for library callers is `CandidateManager`.
"""

from .config import ConfigLoader, SdkConfig
from .manager import CandidateManager

__all__ = ["CandidateManager", "ConfigLoader", "SdkConfig", "__version__"]

__version__ = "0.1.0"
