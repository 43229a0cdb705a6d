"""Init command — record branch roles in the repository's git config."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.prompt import Prompt

from git_env.client.errors import error_handler
from git_env.client.git import GitClient
from git_env.commands._common import console
from git_env.config.constants import OPTION_OTHER, OPTION_PROD, OPTION_PROD_DEPLOY
from git_env.config.manager import ConfigManager, option_key
from git_env.config.models import OPTIONS


def _get_git() -> GitClient:
    return GitClient()


@error_handler
def init(
    prod: Annotated[Optional[str], typer.Option("--prod", help="Production branch")] = None,
    other: Annotated[
        Optional[str], typer.Option("--other", help="Other environment branches, space separated")
    ] = None,
    prod_deploy: Annotated[
        Optional[str], typer.Option("--prod-deploy", help="Command template for production deploys")
    ] = None,
) -> None:
    """Configure which ENV branches are being used."""
    mgr = ConfigManager(_get_git())
    given = {OPTION_PROD: prod, OPTION_OTHER: other, OPTION_PROD_DEPLOY: prod_deploy}

    values: dict[str, str] = {}
    for opt in OPTIONS:
        value = given[opt.name]
        if value is None:
            # Re-running init offers the current values
            current = mgr.git.get_config_value(option_key(opt.name))
            value = Prompt.ask(opt.question, default=current or opt.default, console=console)
        values[opt.name] = value

    mgr.save(values)
    console.print("You're ready to go.")
