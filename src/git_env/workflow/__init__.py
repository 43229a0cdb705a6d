"""Branch workflows: start a feature, deploy it to an environment."""

from git_env.workflow.deploy import DeployWorkflow

__all__ = ["DeployWorkflow"]
