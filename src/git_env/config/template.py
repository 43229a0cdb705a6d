"""Rendering of the production deploy command template.

Templates use ``{{.env}}`` and ``{{.feature}}`` placeholders, which keeps
values written by earlier git-env releases working unchanged.
"""

from __future__ import annotations

import re
import shlex

from git_env.client.errors import TemplateError

_PLACEHOLDER = re.compile(r"\{\{\s*\.?([A-Za-z_][\w-]*)\s*\}\}")


def render_deploy_command(template: str, env: str, feature: str) -> str:
    """Substitute branch names into *template*, shell-quoted."""
    values = {"env": env, "feature": feature}

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in values:
            raise TemplateError(
                f"Unknown placeholder '{match.group(0)}' in prod-deploy template. "
                "Use {{.env}} and {{.feature}}."
            )
        return shlex.quote(values[name])

    return _PLACEHOLDER.sub(_replace, template)
