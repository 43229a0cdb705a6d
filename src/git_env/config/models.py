"""Pydantic models for the env-branch configuration."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from git_env.client.errors import RemoteNotConfiguredError
from git_env.config.constants import (
    DEFAULT_OTHER,
    DEFAULT_PROD,
    DEFAULT_PROD_DEPLOY,
    OPTION_OTHER,
    OPTION_PROD,
    OPTION_PROD_DEPLOY,
)


class BranchRole(str, Enum):
    """Role of a branch relative to an EnvConfig."""

    PRODUCTION = "production"
    ENVIRONMENT = "environment"
    FEATURE = "feature"


class Option(BaseModel):
    """A recognised ``env-branch.*`` option and how ``init`` asks for it."""

    model_config = ConfigDict(frozen=True)

    name: str
    question: str
    default: str


OPTIONS: tuple[Option, ...] = (
    Option(
        name=OPTION_PROD,
        question="What is your production branch?",
        default=DEFAULT_PROD,
    ),
    Option(
        name=OPTION_OTHER,
        question="What other environment branches do you have?",
        default=DEFAULT_OTHER,
    ),
    Option(
        name=OPTION_PROD_DEPLOY,
        question="What command should be run to deploy to the production branch?",
        default=DEFAULT_PROD_DEPLOY,
    ),
)


class EnvConfig(BaseModel):
    """Branch roles for one repository.

    Built once per invocation from the git config and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    prod: str = Field(description="The single production branch")
    other: list[str] = Field(
        default_factory=list, description="Other environment branches, in configured order",
    )
    prod_deploy: str = Field(
        default=DEFAULT_PROD_DEPLOY,
        description="Shell command template run when deploying to production",
    )

    def is_env(self, branch: str) -> bool:
        if branch == self.prod:
            return True
        return branch in self.other

    def is_prod(self, branch: str) -> bool:
        return branch == self.prod

    def role(self, branch: str) -> BranchRole:
        if self.is_prod(branch):
            return BranchRole.PRODUCTION
        if self.is_env(branch):
            return BranchRole.ENVIRONMENT
        return BranchRole.FEATURE

    @property
    def env_branches(self) -> list[str]:
        """Production first, then the other environment branches, without duplicates."""
        seen: list[str] = []
        for branch in [self.prod, *self.other]:
            if branch and branch not in seen:
                seen.append(branch)
        return seen

    def prod_remote(self, get_value: Callable[[str], str | None]) -> str:
        """Return the upstream remote of the production branch.

        *get_value* looks up a raw git config key and returns ``None`` when
        it is unset.
        """
        remote = get_value(f"branch.{self.prod}.remote")
        if not remote:
            raise RemoteNotConfiguredError(self.prod)
        return remote
