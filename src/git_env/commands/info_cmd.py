"""Informational commands — help, version, show."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from git_env import __version__
from git_env.client.errors import RemoteNotConfiguredError, error_handler
from git_env.client.git import GitClient
from git_env.commands._common import FormatOpt, console
from git_env.config.manager import ConfigManager
from git_env.output.formatter import output

# name -> (usage, summary, details)
COMMANDS: dict[str, tuple[str, str, str]] = {
    "help": (
        "git env help [COMMAND]",
        "show this help",
        "Without COMMAND, list all commands. With COMMAND, describe it.",
    ),
    "version": (
        "git env version",
        "show git-env's version",
        "Print the installed git-env version.",
    ),
    "init": (
        "git env init",
        "configure which ENV branches are being used",
        "Ask for the production branch, the other environment branches and the\n"
        "command used for production deploys, then store the answers in the\n"
        "repository's local git config under env-branch.*. Pass --prod, --other\n"
        "or --prod-deploy to skip the matching question.",
    ),
    "start": (
        "git env start BRANCH_NAME",
        "start a new feature branch",
        "Check out the production branch, pull --rebase it from its remote, then\n"
        "create BRANCH_NAME from it and check it out.",
    ),
    "deploy": (
        "git env deploy ENV_BRANCH [FEATURE_BRANCH]",
        "deploy a feature branch to an ENV branch (FEATURE_BRANCH defaults to current branch)",
        "Rebase FEATURE_BRANCH onto the remote production branch and ENV_BRANCH onto\n"
        "its remote, then merge. ENV_BRANCH must be a configured environment branch\n"
        "and FEATURE_BRANCH must not be one. ENV_BRANCH must point at the same commit\n"
        "as its remote-tracking branch unless --skip-remote-check is given.\n"
        "Deploys to the production branch run the env-branch.prod-deploy command;\n"
        "other deploys are a plain git merge. Nothing is pushed.",
    ),
    "show": (
        "git env show",
        "show the configured branches and their roles",
        "Print the production branch, the other environment branches, the\n"
        "production remote and the production deploy command.",
    ),
}


def _get_git() -> GitClient:
    return GitClient()


def print_help(command: str | None = None) -> None:
    if command in COMMANDS:
        usage, summary, details = COMMANDS[command]
        console.print(f"Usage: {usage}\n\n{summary}\n\n{details}", markup=False)
        return
    width = max(len(usage) for usage, _, _ in COMMANDS.values())
    console.print("Commands:")
    for usage, summary, _ in COMMANDS.values():
        console.print(f"  {usage.ljust(width)} - {summary}", markup=False)


def help_command(
    command: Annotated[Optional[str], typer.Argument(metavar="COMMAND", help="Command to describe")] = None,
) -> None:
    """Show help for git-env or one of its commands."""
    print_help(command)


def version() -> None:
    """Show git-env's version."""
    print(f"git-env version: {__version__}")


@error_handler
def show(fmt: FormatOpt = "table") -> None:
    """Show the configured branches and their roles."""
    mgr = ConfigManager(_get_git())
    config = mgr.config
    try:
        remote: str | None = mgr.prod_remote()
    except RemoteNotConfiguredError:
        remote = None

    rows = [(branch, config.role(branch).value) for branch in config.env_branches]
    output(
        {**config.model_dump(), "remote": remote},
        fmt,
        rows=rows,
        title="Environment Branches",
        settings={"remote": remote or "(not set)", "prod-deploy": config.prod_deploy},
    )
