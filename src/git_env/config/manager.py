"""Configuration manager — read/write env-branch options in the git config."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Mapping

from git_env.client.errors import ConfigNotInitializedError
from git_env.config.constants import (
    CONFIG_SECTION,
    OPTION_OTHER,
    OPTION_PROD,
    OPTION_PROD_DEPLOY,
)
from git_env.config.models import OPTIONS, EnvConfig

if TYPE_CHECKING:
    from git_env.client.git import GitClient

LOG = logging.getLogger(__name__)


def option_key(name: str) -> str:
    return f"{CONFIG_SECTION}.{name}"


def load_config(get_option: Callable[[str], str]) -> EnvConfig:
    """Build an EnvConfig from one lookup per recognised option.

    The first failing lookup propagates; nothing is defaulted here.
    ``other`` is split on single spaces, so an empty value yields ``[""]``.
    """
    values: dict[str, str] = {}
    for opt in OPTIONS:
        values[opt.name] = get_option(opt.name)
    return EnvConfig(
        prod=values[OPTION_PROD],
        other=values[OPTION_OTHER].split(" "),
        prod_deploy=values[OPTION_PROD_DEPLOY],
    )


def save_config(values: Mapping[str, str], set_option: Callable[[str, str], None]) -> None:
    """Persist option values in recognised-option order, ignoring unknown names."""
    for opt in OPTIONS:
        if opt.name in values:
            set_option(opt.name, values[opt.name])


class ConfigManager:
    """Loads and stores the env-branch configuration through a GitClient."""

    def __init__(self, git: GitClient) -> None:
        self.git = git
        self._config: EnvConfig | None = None

    @property
    def config(self) -> EnvConfig:
        if self._config is None:
            self._config = load_config(self.get_option)
            LOG.debug("Loaded config: %s", self._config)
        return self._config

    def get_option(self, name: str) -> str:
        value = self.git.get_config_value(option_key(name))
        if value is None:
            raise ConfigNotInitializedError(name)
        return value

    def set_option(self, name: str, value: str) -> None:
        self.git.set_config_value(option_key(name), value)

    def save(self, values: Mapping[str, str]) -> None:
        save_config(values, self.set_option)
        self._config = None

    def prod_remote(self) -> str:
        return self.config.prod_remote(self.git.get_config_value)
