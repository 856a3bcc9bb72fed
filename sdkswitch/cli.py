"""Command-line interface for sdkswitch.

Responsibilities:
- Expose user-facing commands for candidate version operations.
- Read the environment once and hand an explicit `SdkConfig` to the core.
- Map every failure to a single exit point with code 1.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_current_versions,
    echo_switch_result,
    exit_with_command_error,
)
from .config import ConfigLoader
from .manager import CandidateManager
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="sdkswitch",
    no_args_is_help=True,
    help="Switch and remove locally installed SDK candidate versions.",
)


@dataclass(slots=True)
class _GlobalOptions:
    """Options shared by every command invocation."""

    root: Path | None = None
    verbose: bool = False


def _build_manager(ctx: typer.Context) -> CandidateManager:
    """Resolve config from CLI options and environment, then build the manager."""

    options = ctx.obj if isinstance(ctx.obj, _GlobalOptions) else _GlobalOptions()
    config = ConfigLoader.from_env(
        root_override=options.root,
        log_level="INFO" if options.verbose else None,
    )
    return CandidateManager(config, run_logger=RunLogger(level=config.log_level))


@app.callback()
def main_callback(
    ctx: typer.Context,
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            help="Version-manager root directory (overrides `SDKMAN_DIR`).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log operation start/complete events to stderr."),
    ] = False,
) -> None:
    """Switch and remove locally installed SDK candidate versions."""

    ctx.obj = _GlobalOptions(root=root, verbose=verbose)


def default_command(
    ctx: typer.Context,
    candidate: Annotated[str, typer.Argument(help="Candidate name, e.g. `java`.")],
    version: Annotated[str, typer.Argument(help="Installed version to make current.")],
) -> None:
    """Set the local default version of a candidate."""

    try:
        manager = _build_manager(ctx)
        result = manager.set_default(candidate, version)
    except Exception as exc:
        exit_with_command_error("default", exc)

    echo_switch_result(result)


def current_command(
    ctx: typer.Context,
    candidate: Annotated[
        str | None,
        typer.Argument(help="Candidate to query; omit to list all candidates in use."),
    ] = None,
) -> None:
    """Display the current version in use for one or all candidates."""

    try:
        manager = _build_manager(ctx)
        if candidate is None:
            rows = manager.current_versions()
        else:
            version = manager.current_version(candidate)
    except Exception as exc:
        exit_with_command_error("current", exc)

    if candidate is None:
        echo_current_versions(rows)
        return
    typer.echo(f"Using {candidate} version {version}")


def uninstall_command(
    ctx: typer.Context,
    candidate: Annotated[str, typer.Argument(help="Candidate name, e.g. `java`.")],
    version: Annotated[str, typer.Argument(help="Installed version to remove.")],
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help=(
                "Remove even if this version is currently selected "
                "(may leave the candidate unusable)."
            ),
        ),
    ] = False,
) -> None:
    """Remove a specific candidate version."""

    try:
        manager = _build_manager(ctx)
        result = manager.uninstall(candidate, version, force=force)
    except Exception as exc:
        exit_with_command_error("uninstall", exc)

    if result.pointer_cleared:
        typer.echo(f"Deselected {candidate} {version} as current.")
    typer.echo(f"removed {candidate} {version}.")


def home_command(
    ctx: typer.Context,
    candidate: Annotated[str, typer.Argument(help="Candidate name, e.g. `java`.")],
    version: Annotated[str, typer.Argument(help="Installed version to locate.")],
) -> None:
    """Output the path of a specific candidate version."""

    try:
        manager = _build_manager(ctx)
        path = manager.home(candidate, version)
    except Exception as exc:
        exit_with_command_error("home", exc)

    typer.echo(str(path))


app.command("default")(default_command)
app.command("d", hidden=True)(default_command)
app.command("current")(current_command)
app.command("c", hidden=True)(current_command)
app.command("uninstall")(uninstall_command)
app.command("rm", hidden=True)(uninstall_command)
app.command("home")(home_command)
app.command("h", hidden=True)(home_command)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
