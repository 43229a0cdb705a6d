"""Git subprocess client.

Read-only queries capture their output; commands that change the
repository echo ``+ <command>`` and inherit the terminal so the operator
sees git's own progress and prompts.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Callable

from rich.console import Console

from git_env.client.errors import ExternalCommandError, NoCurrentBranchError
from git_env.config.constants import (
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_SHELL,
    ENV_GIT_EXECUTABLE,
)

LOG = logging.getLogger(__name__)

_DETACHED_PREFIX = "("


def parse_current_branch(listing: str) -> str:
    """Return the branch marked with ``* `` in ``git branch`` output."""
    for line in listing.split("\n"):
        if line.startswith("* "):
            name = line[2:].split(" ")[0]
            if not name or name.startswith(_DETACHED_PREFIX):
                raise NoCurrentBranchError("HEAD is detached; pass FEATURE_BRANCH explicitly.")
            return name
    raise NoCurrentBranchError()


def detect_current_branch(list_branches: Callable[[], str]) -> str:
    """Detect the current branch from a callable returning ``git branch`` output."""
    return parse_current_branch(list_branches())


class GitClient:
    """Synchronous wrapper around the git CLI for one working tree."""

    def __init__(
        self,
        cwd: str | None = None,
        *,
        dry_run: bool = False,
        console: Console | None = None,
    ) -> None:
        self.cwd = cwd
        self.dry_run = dry_run
        self.executable = os.environ.get(ENV_GIT_EXECUTABLE) or DEFAULT_GIT_EXECUTABLE
        self.console = console or Console(highlight=False)

    def _capture(self, args: list[str]) -> subprocess.CompletedProcess[str]:
        cmd = [self.executable, *args]
        LOG.debug("Running git query: %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                cwd=self.cwd,
                check=False,
                text=True,
                capture_output=True,
            )
        except OSError as exc:
            raise ExternalCommandError(cmd, detail=str(exc)) from exc

    def _query(self, args: list[str]) -> str:
        completed = self._capture(args)
        if completed.returncode != 0:
            LOG.debug("git stderr: %s", completed.stderr)
            raise ExternalCommandError(
                [self.executable, *args],
                completed.returncode,
                completed.stderr.strip(),
            )
        return completed.stdout

    def _execute(self, cmd: list[str]) -> None:
        self.console.print(f"+ {' '.join(cmd)}", markup=False)
        if self.dry_run:
            LOG.info("Dry run, not executing: %s", " ".join(cmd))
            return
        LOG.debug("Running command: %s", " ".join(cmd))
        try:
            completed = subprocess.run(cmd, cwd=self.cwd, check=False)
        except OSError as exc:
            raise ExternalCommandError(cmd, detail=str(exc)) from exc
        if completed.returncode != 0:
            raise ExternalCommandError(cmd, completed.returncode)

    # Queries

    def get_config_value(self, key: str) -> str | None:
        """Return a git config value, or ``None`` when the key is unset."""
        completed = self._capture(["config", key])
        if completed.returncode == 1:
            return None
        if completed.returncode != 0:
            raise ExternalCommandError(
                [self.executable, "config", key],
                completed.returncode,
                completed.stderr.strip(),
            )
        return completed.stdout.rstrip("\n")

    def list_branches(self) -> str:
        return self._query(["branch"])

    def current_branch(self) -> str:
        return detect_current_branch(self.list_branches)

    def rev_parse(self, ref: str) -> str:
        return self._query(["rev-parse", ref]).strip()

    # Mutations

    def set_config_value(self, key: str, value: str) -> None:
        if self.dry_run:
            self.console.print(
                f"+ {self.executable} config --local --replace-all {key} {value}", markup=False,
            )
            return
        self._query(["config", "--local", "--replace-all", key, value])

    def run(self, *args: str) -> None:
        """Run a git command attached to the terminal."""
        self._execute([self.executable, *args])

    def run_shell(self, command: str) -> None:
        """Run a rendered command line through ``sh -c``."""
        self._execute([DEFAULT_SHELL, "-c", command])

    def checkout(self, ref: str) -> None:
        self.run("checkout", ref)

    def create_branch(self, name: str) -> None:
        self.run("checkout", "-b", name)

    def pull_rebase(self, remote: str, branch: str) -> None:
        self.run("pull", "--rebase", remote, branch)

    def merge(self, ref: str) -> None:
        self.run("merge", ref)
