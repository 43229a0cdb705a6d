"""Start and deploy workflows.

``deploy`` moves through four stages: resolve the feature branch,
validate the branch roles (and optionally the remote tip), rebase both
branches onto their upstreams, then merge. Every precondition is checked
before the first checkout, so a rejected deploy leaves the working tree
untouched. A failure after that point stops immediately without
rolling back, possibly leaving another branch checked out.
"""

from __future__ import annotations

import logging

from git_env.client.errors import (
    DivergedRemoteError,
    EnvironmentAsFeatureError,
    NotAnEnvironmentBranchError,
)
from git_env.client.git import GitClient
from git_env.config.models import EnvConfig
from git_env.config.template import render_deploy_command

LOG = logging.getLogger(__name__)


class DeployWorkflow:
    """Runs the branch operations for ``start`` and ``deploy``."""

    def __init__(self, config: EnvConfig, git: GitClient) -> None:
        self.config = config
        self.git = git
        self._remote: str | None = None

    @property
    def remote(self) -> str:
        if self._remote is None:
            self._remote = self.config.prod_remote(self.git.get_config_value)
        return self._remote

    def start(self, new_branch: str) -> None:
        """Create *new_branch* from an up-to-date production branch."""
        prod = self.config.prod
        remote = self.remote
        self.git.checkout(prod)
        self.git.pull_rebase(remote, prod)
        self.git.create_branch(new_branch)

    def resolve_feature(self, feature: str | None) -> str:
        if feature:
            return feature
        detected = self.git.current_branch()
        LOG.info("Using current branch %s as feature", detected)
        return detected

    def validate(self, env_branch: str, feature: str, *, verify_remote: bool = True) -> None:
        # An empty "other" option loads as [""], so "" would pass is_env
        if not env_branch or not self.config.is_env(env_branch):
            raise NotAnEnvironmentBranchError(env_branch)
        if self.config.is_env(feature):
            raise EnvironmentAsFeatureError(feature)
        remote = self.remote
        if verify_remote:
            local = self.git.rev_parse(env_branch)
            upstream = self.git.rev_parse(f"{remote}/{env_branch}")
            if local != upstream:
                raise DivergedRemoteError(env_branch, remote)

    def synchronize(self, env_branch: str, feature: str) -> None:
        self.git.checkout(feature)
        self.git.pull_rebase(self.remote, self.config.prod)
        self.git.checkout(env_branch)
        self.git.pull_rebase(self.remote, env_branch)

    def deploy_command(self, env_branch: str, feature: str) -> str | None:
        """Render the production deploy command, or None for other environments."""
        if not self.config.is_prod(env_branch):
            return None
        return render_deploy_command(self.config.prod_deploy, env_branch, feature)

    def merge(self, env_branch: str, feature: str, command: str | None = None) -> None:
        if command is not None:
            # Production merges run the configured template (--no-ff by default)
            self.git.checkout(feature)
            self.git.run_shell(command)
        else:
            self.git.checkout(env_branch)
            self.git.merge(feature)

    def deploy(
        self,
        env_branch: str,
        feature: str | None = None,
        *,
        verify_remote: bool = True,
    ) -> str:
        """Merge *feature* (default: current branch) into *env_branch*.

        Returns the feature branch that was deployed. Nothing is pushed.
        """
        feature = self.resolve_feature(feature)
        self.validate(env_branch, feature, verify_remote=verify_remote)
        command = self.deploy_command(env_branch, feature)
        LOG.info("Validated deploy of %s into %s", feature, env_branch)
        self.synchronize(env_branch, feature)
        LOG.info("Synchronized %s and %s with %s", feature, env_branch, self.remote)
        self.merge(env_branch, feature, command)
        LOG.info("Merged %s into %s", feature, env_branch)
        return feature
