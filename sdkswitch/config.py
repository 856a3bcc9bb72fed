"""Configuration model and loaders for sdkswitch.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Resolve the state root directory with deterministic precedence.
- Read the process environment exactly once, at the CLI boundary.

Key types:
- `SdkConfig`: normalized runtime settings for one invocation.
- `ConfigLoader`: static construction helpers for `SdkConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Mapping

from .errors import RootDirectoryError
from .layout import SdkLayout
from .parsing import normalize_optional_string


ROOT_DIR_ENV_VAR = "SDKMAN_DIR"
LOG_LEVEL_ENV_VAR = "SDKSWITCH_LOG_LEVEL"
DEFAULT_ROOT_NAME = ".sdkman"
_DEFAULT_LOG_LEVEL = "WARNING"
_SUPPORTED_LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)


@dataclass(frozen=True, slots=True)
class SdkConfig:
    """Runtime configuration for one invocation.

    Attributes:
        root_dir: Absolute path to the version-manager state tree.
        log_level: Minimum level emitted by the run logger.
    """

    root_dir: Path
    log_level: str = _DEFAULT_LOG_LEVEL

    @property
    def layout(self) -> SdkLayout:
        """Return the path layout rooted at `root_dir`."""

        return SdkLayout(self.root_dir)

    def validate(self) -> None:
        """Validate configuration values before any operation runs."""

        if not self.root_dir.is_absolute():
            raise ValueError(f"`root_dir` must be an absolute path, got `{self.root_dir}`.")
        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(
                f"Unsupported log level `{self.log_level}`; supported: {supported}."
            )


def _is_windows() -> bool:
    return os.name == "nt"


def infer_home_dir(env: Mapping[str, str]) -> Path:
    """Resolve the user's home directory, environment first.

    Resolution order: `USERPROFILE` and `HOMEDRIVE` + `HOMEPATH` (Windows only),
    then `HOME`, then `Path.home()`.

    Raises:
        RootDirectoryError: If no source yields a home directory.
    """

    if _is_windows():
        user_profile = normalize_optional_string(env.get("USERPROFILE"))
        if user_profile is not None:
            return Path(user_profile)

        home_drive = normalize_optional_string(env.get("HOMEDRIVE"))
        home_path = normalize_optional_string(env.get("HOMEPATH"))
        if home_drive is not None and home_path is not None:
            return Path(f"{home_drive}{home_path}")

    home = normalize_optional_string(env.get("HOME"))
    if home is not None:
        return Path(home)

    try:
        return Path.home()
    except RuntimeError as exc:
        raise RootDirectoryError(
            operation="config",
            detail="Cannot determine the home directory.",
            hint=f"Set `{ROOT_DIR_ENV_VAR}` to the version-manager root directory.",
        ) from exc


def infer_root_dir(env: Mapping[str, str], root_override: Path | None = None) -> Path:
    """Resolve the absolute state root directory.

    Precedence is `root_override` > `SDKMAN_DIR` > `<home>/.sdkman`.
    """

    if root_override is not None:
        return root_override.expanduser().absolute()

    env_root = normalize_optional_string(env.get(ROOT_DIR_ENV_VAR))
    if env_root is not None:
        return Path(env_root).expanduser().absolute()

    return (infer_home_dir(env) / DEFAULT_ROOT_NAME).absolute()


class ConfigLoader:
    """Factory methods for creating `SdkConfig` from external sources."""

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None,
        root_override: Path | None = None,
        log_level: str | None = None,
    ) -> SdkConfig:
        """Create a validated config from environment variables and CLI overrides."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        root_dir = infer_root_dir(env_map, root_override)
        resolved_level = (
            normalize_optional_string(log_level)
            or normalize_optional_string(env_map.get(LOG_LEVEL_ENV_VAR))
            or _DEFAULT_LOG_LEVEL
        ).upper()

        config = SdkConfig(root_dir=root_dir, log_level=resolved_level)
        config.validate()
        return config
