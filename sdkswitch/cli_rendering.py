"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
switch outcomes, and current-version listings.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import SdkCommandError
from .switcher import SwitchResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, SdkCommandError):
        typer.secho(f"{command_name} failed: {exc.detail}", fg=typer.colors.RED, err=True)
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_switch_result(result: SwitchResult) -> None:
    """Print the default-version switch summary and any copy fallback notice."""

    typer.echo(
        f"setting {result.candidate} {result.version} as the default version for all shells."
    )
    if result.copied:
        typer.secho(
            "cannot create current symlink, fell back to copy!",
            fg=typer.colors.YELLOW,
            bold=True,
        )


def echo_current_versions(rows: list[tuple[str, str]]) -> None:
    """Print current versions for all candidates in use, or a notice when none are."""

    if not rows:
        typer.echo("No candidates are in use.", err=True)
        return
    typer.secho("Current versions in use:", bold=True)
    for candidate, version in rows:
        typer.echo(f"{candidate} {version}")
