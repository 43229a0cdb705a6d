"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console
from rich.markup import escape

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class GitEnvError(Exception):
    """Base exception for git-env."""

    exit_code: int = 1


class ConfigurationError(GitEnvError):
    """The repository's env-branch configuration is missing or invalid."""

    exit_code = 2


class ConfigNotInitializedError(ConfigurationError):
    """A required option is not set in the git config."""

    def __init__(self, option: str = "") -> None:
        self.option = option
        super().__init__("This repo isn't git env enabled. Run 'git env init' first.")


class RemoteNotConfiguredError(ConfigurationError):
    """The production branch has no upstream remote."""

    def __init__(self, branch: str) -> None:
        self.branch = branch
        super().__init__(f"Failed to get remote of {branch} branch.")


class TemplateError(ConfigurationError):
    """The production deploy template references an unknown placeholder."""


class NoCurrentBranchError(GitEnvError):
    """The checked-out branch could not be detected (e.g. detached HEAD)."""

    exit_code = 3

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or "Could not detect current branch.")


class NotAnEnvironmentBranchError(GitEnvError):
    """Deploy target is not a configured environment branch."""

    exit_code = 4

    def __init__(self, branch: str) -> None:
        self.branch = branch
        super().__init__(
            f"Branch {branch} is not an env branch. Can't merge a feature into it."
        )


class EnvironmentAsFeatureError(GitEnvError):
    """An environment branch was passed as the feature branch."""

    exit_code = 5

    def __init__(self, branch: str) -> None:
        self.branch = branch
        super().__init__(
            f"Branch {branch} is an env branch. "
            "Can't merge an env branch into another env branch."
        )


class DivergedRemoteError(GitEnvError):
    """Local env branch and its remote-tracking branch point at different commits."""

    exit_code = 6

    def __init__(self, branch: str, remote: str) -> None:
        self.branch = branch
        self.remote = remote
        super().__init__(
            f"Branch {branch} and branch {remote}/{branch} do not point at the same commit."
        )


class ExternalCommandError(GitEnvError):
    """An external git or shell command failed."""

    exit_code = 7

    def __init__(self, command: list[str], returncode: int | None = None, detail: str = "") -> None:
        self.command = command
        self.returncode = returncode
        msg = f"Failed executing command: {' '.join(command)}"
        if returncode is not None:
            msg += f" (exit status {returncode})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


def error_handler(func: F) -> F:
    """Decorator that catches GitEnvError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except GitEnvError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}", highlight=False)
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)
        except KeyboardInterrupt:
            raise SystemExit(130)

    return wrapper  # type: ignore[return-value]
