"""Config namespace, option defaults, and environment variable names."""

from __future__ import annotations

APP_NAME = "git-env"

# Options live in the repository's local git config as ``env-branch.<name>``
CONFIG_SECTION = "env-branch"

OPTION_PROD = "prod"
OPTION_OTHER = "other"
OPTION_PROD_DEPLOY = "prod-deploy"

DEFAULT_PROD = "master"
DEFAULT_OTHER = "stage dev"
DEFAULT_PROD_DEPLOY = "git checkout {{.env}} && git merge --no-ff {{.feature}}"

# Environment variable names
ENV_GIT_EXECUTABLE = "GIT_ENV_GIT"

DEFAULT_GIT_EXECUTABLE = "git"
DEFAULT_SHELL = "sh"
