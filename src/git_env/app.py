"""Root Typer app — global options and command registration."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from git_env.commands import info_cmd, init_cmd, workflow_cmd
from git_env.logging_utils import configure_logging

app = typer.Typer(
    name="git-env",
    help="Environment branch workflow for git: start features, deploy them to ENV branches.",
    invoke_without_command=True,
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        info_cmd.version()
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase log verbosity (repeatable).")
    ] = 0,
) -> None:
    """Manage production, environment and feature branches."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        info_cmd.print_help()


# init, help and version work without a configured repository
app.command("init")(init_cmd.init)
app.command("help")(info_cmd.help_command)
app.command("version")(info_cmd.version)
app.command("start")(workflow_cmd.start)
app.command("deploy")(workflow_cmd.deploy)
app.command("show")(info_cmd.show)


def main() -> None:
    app(prog_name="git env")
