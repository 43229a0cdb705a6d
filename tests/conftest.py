"""Shared test fixtures."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from git_env.client.errors import ExternalCommandError
from git_env.client.git import GitClient
from git_env.config.constants import DEFAULT_PROD_DEPLOY
from git_env.config.models import EnvConfig

DEFAULT_CONFIG_VALUES = {
    "env-branch.prod": "master",
    "env-branch.other": "stage dev",
    "env-branch.prod-deploy": DEFAULT_PROD_DEPLOY,
    "branch.master.remote": "origin",
}

DEFAULT_REVISIONS = {
    "master": "a1" * 20,
    "origin/master": "a1" * 20,
    "stage": "b2" * 20,
    "origin/stage": "b2" * 20,
    "dev": "c3" * 20,
    "origin/dev": "c3" * 20,
}


class FakeGit(GitClient):
    """GitClient that records commands instead of running them.

    Config values, ``git branch`` output and revision ids come from plain
    attributes so tests can shape the repository state directly.
    """

    def __init__(
        self,
        config_values: dict[str, str] | None = None,
        branch_listing: str = "  master\n* feature/login\n  stage\n",
        revisions: dict[str, str] | None = None,
        *,
        dry_run: bool = False,
    ) -> None:
        self.output = io.StringIO()
        super().__init__(dry_run=dry_run, console=Console(file=self.output, width=200))
        self.executable = "git"
        self.config_values = dict(DEFAULT_CONFIG_VALUES if config_values is None else config_values)
        self.branch_listing = branch_listing
        self.revisions = dict(DEFAULT_REVISIONS if revisions is None else revisions)
        self.executed: list[list[str]] = []
        self.config_writes: list[tuple[str, str]] = []
        self.lookups: list[str] = []

    def _execute(self, cmd: list[str]) -> None:
        self.executed.append(cmd)

    def get_config_value(self, key: str) -> str | None:
        self.lookups.append(key)
        return self.config_values.get(key)

    def set_config_value(self, key: str, value: str) -> None:
        self.config_writes.append((key, value))
        self.config_values[key] = value

    def list_branches(self) -> str:
        return self.branch_listing

    def rev_parse(self, ref: str) -> str:
        if ref not in self.revisions:
            raise ExternalCommandError(["git", "rev-parse", ref], 128)
        return self.revisions[ref]


@pytest.fixture(autouse=True)
def _no_git_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GIT_ENV_GIT", raising=False)


@pytest.fixture
def fake_git() -> FakeGit:
    """Return a FakeGit for an initialized repo on branch feature/login."""
    return FakeGit()


@pytest.fixture
def env_config() -> EnvConfig:
    """Return the config used throughout the examples: master + stage, dev."""
    return EnvConfig(prod="master", other=["stage", "dev"])


@pytest.fixture
def fake_git_factory() -> type[FakeGit]:
    """Return the FakeGit class for tests that need a custom repository state."""
    return FakeGit
