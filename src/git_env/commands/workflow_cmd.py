"""Workflow commands — start a feature branch, deploy it to an environment."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from git_env.client.errors import error_handler
from git_env.client.git import GitClient
from git_env.commands._common import DryRunOpt, console
from git_env.config.manager import ConfigManager
from git_env.workflow import DeployWorkflow


def _get_git(dry_run: bool = False) -> GitClient:
    return GitClient(dry_run=dry_run)


def _make_workflow(dry_run: bool) -> DeployWorkflow:
    git = _get_git(dry_run)
    config = ConfigManager(git).config
    return DeployWorkflow(config, git)


@error_handler
def start(
    branch_name: Annotated[str, typer.Argument(metavar="BRANCH_NAME", help="New feature branch")],
    dry_run: DryRunOpt = False,
) -> None:
    """Start a new feature branch from the production branch."""
    _make_workflow(dry_run).start(branch_name)


@error_handler
def deploy(
    env_branch: Annotated[str, typer.Argument(metavar="ENV_BRANCH", help="Environment branch to deploy to")],
    feature_branch: Annotated[
        Optional[str],
        typer.Argument(metavar="FEATURE_BRANCH", help="Feature branch (defaults to the current branch)"),
    ] = None,
    dry_run: DryRunOpt = False,
    skip_remote_check: Annotated[
        bool,
        typer.Option(
            "--skip-remote-check",
            help="Don't require ENV_BRANCH to match its remote-tracking branch",
        ),
    ] = False,
) -> None:
    """Deploy a feature branch to an ENV branch."""
    workflow = _make_workflow(dry_run)
    feature = workflow.deploy(env_branch, feature_branch, verify_remote=not skip_remote_check)
    if not dry_run:
        console.print(f"Deployed {feature} to {env_branch}. Push {env_branch} when ready.", markup=False)
