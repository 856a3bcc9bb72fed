"""Unit tests for root-directory resolution and config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

import sdkswitch.config as config_module
from sdkswitch.config import ConfigLoader, SdkConfig, infer_home_dir, infer_root_dir


def test_infer_root_dir_prefers_env_override() -> None:
    """`SDKMAN_DIR` should win over any home-directory fallback."""

    env = {"SDKMAN_DIR": "/home/someone/.sdkman", "HOME": "/home/other"}

    assert infer_root_dir(env) == Path("/home/someone/.sdkman")


def test_infer_root_dir_falls_back_to_home_when_env_is_blank() -> None:
    """Blank `SDKMAN_DIR` values should be treated as unset."""

    env = {"SDKMAN_DIR": "   ", "HOME": "/home/someone"}

    assert infer_root_dir(env) == Path("/home/someone/.sdkman")


def test_infer_root_dir_cli_override_beats_environment(tmp_path: Path) -> None:
    """An explicit root override should take precedence over `SDKMAN_DIR`."""

    env = {"SDKMAN_DIR": "/ignored"}

    assert infer_root_dir(env, root_override=tmp_path) == tmp_path


def test_infer_root_dir_makes_relative_values_absolute() -> None:
    """Relative roots should be anchored to the working directory."""

    resolved = infer_root_dir({"SDKMAN_DIR": "relative/.sdkman"})

    assert resolved.is_absolute()
    assert resolved == Path.cwd() / "relative" / ".sdkman"


def test_infer_home_dir_follows_windows_then_unix_precedence(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """On Windows, home lookup should try USERPROFILE, HOMEDRIVE+HOMEPATH, then HOME."""

    monkeypatch.setattr(config_module, "_is_windows", lambda: True)

    assert infer_home_dir({"USERPROFILE": "/profile", "HOME": "/home/x"}) == Path("/profile")
    assert infer_home_dir({"HOMEDRIVE": "C:", "HOMEPATH": "/Users/x", "HOME": "/h"}) == Path(
        "C:/Users/x"
    )
    assert infer_home_dir({"HOMEDRIVE": "C:", "HOME": "/home/x"}) == Path("/home/x")


def test_infer_home_dir_ignores_windows_variables_elsewhere(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Outside Windows, leaked profile variables must not redirect the root."""

    monkeypatch.setattr(config_module, "_is_windows", lambda: False)
    env = {
        "USERPROFILE": "/mnt/c/Users/x",
        "HOMEDRIVE": "C:",
        "HOMEPATH": "/Users/x",
        "HOME": "/home/x",
    }

    assert infer_home_dir(env) == Path("/home/x")
    assert infer_root_dir(env) == Path("/home/x/.sdkman")


def test_infer_home_dir_uses_path_home_as_last_resort(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without any home variables the platform lookup should be used."""

    monkeypatch.setattr(Path, "home", classmethod(lambda cls: Path("/fallback/home")))

    assert infer_home_dir({}) == Path("/fallback/home")


def test_config_loader_from_env_resolves_root_and_log_level(tmp_path: Path) -> None:
    """Loader should build a validated config from environment values."""

    config = ConfigLoader.from_env(
        env={"SDKMAN_DIR": str(tmp_path), "SDKSWITCH_LOG_LEVEL": " debug "}
    )

    assert config.root_dir == tmp_path
    assert config.log_level == "DEBUG"
    assert config.layout.manifest_path == tmp_path / "var" / "candidates"


def test_config_loader_explicit_log_level_overrides_env(tmp_path: Path) -> None:
    """CLI-provided log level should win over the environment value."""

    config = ConfigLoader.from_env(
        env={"SDKMAN_DIR": str(tmp_path), "SDKSWITCH_LOG_LEVEL": "ERROR"},
        log_level="INFO",
    )

    assert config.log_level == "INFO"


def test_config_loader_rejects_unknown_log_level(tmp_path: Path) -> None:
    """Unsupported log level names should fail with an actionable message."""

    with pytest.raises(ValueError, match="Unsupported log level `LOUD`"):
        ConfigLoader.from_env(env={"SDKMAN_DIR": str(tmp_path), "SDKSWITCH_LOG_LEVEL": "loud"})


def test_sdk_config_validate_requires_absolute_root() -> None:
    """Config validation should reject relative root directories."""

    with pytest.raises(ValueError, match="must be an absolute path"):
        SdkConfig(root_dir=Path("relative")).validate()
