"""End-to-end workflow against real git repositories."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from git_env.client.errors import DivergedRemoteError
from git_env.client.git import GitClient
from git_env.config.manager import ConfigManager
from git_env.workflow import DeployWorkflow

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def _git(args: list[str], cwd: Path) -> str:
    return subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        text=True,
        capture_output=True,
        check=True,
    ).stdout.strip()


def _commit(repo: Path, name: str, content: str) -> None:
    (repo / name).write_text(content)
    _git(["add", name], cwd=repo)
    _git(["commit", "-m", f"add {name}"], cwd=repo)


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A working clone with master and stage tracking a local bare origin."""
    monkeypatch.setenv("GIT_EDITOR", "true")
    monkeypatch.setenv("GIT_MERGE_AUTOEDIT", "no")
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("HOME", str(tmp_path))

    origin = tmp_path / "origin.git"
    work = tmp_path / "work"
    _git(["init", "--bare", str(origin)], cwd=tmp_path)
    work.mkdir()
    _git(["init"], cwd=work)
    _git(["symbolic-ref", "HEAD", "refs/heads/master"], cwd=work)
    _git(["config", "user.name", "git-env"], cwd=work)
    _git(["config", "user.email", "git-env@example.com"], cwd=work)
    _git(["config", "commit.gpgsign", "false"], cwd=work)
    _commit(work, "README", "hello\n")
    _git(["remote", "add", "origin", str(origin)], cwd=work)
    _git(["push", "-u", "origin", "master"], cwd=work)
    _git(["branch", "stage"], cwd=work)
    _git(["push", "-u", "origin", "stage"], cwd=work)
    return work


def _workflow(repo: Path) -> DeployWorkflow:
    git = GitClient(cwd=str(repo))
    mgr = ConfigManager(git)
    mgr.save({"prod": "master", "other": "stage", "prod-deploy": "git checkout {{.env}} && git merge --no-ff {{.feature}}"})
    return DeployWorkflow(mgr.config, git)


def test_init_writes_local_config(repo: Path):
    _workflow(repo)
    assert _git(["config", "env-branch.prod"], cwd=repo) == "master"
    assert _git(["config", "env-branch.other"], cwd=repo) == "stage"


def test_start_and_deploy_to_stage(repo: Path):
    workflow = _workflow(repo)
    workflow.start("feature/x")
    assert _git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo) == "feature/x"

    _commit(repo, "feature.txt", "x\n")
    feature_tip = _git(["rev-parse", "HEAD"], cwd=repo)

    assert workflow.deploy("stage") == "feature/x"
    assert _git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo) == "stage"
    assert _git(["rev-parse", "stage"], cwd=repo) == feature_tip
    # Nothing is pushed
    assert _git(["rev-parse", "origin/stage"], cwd=repo) != feature_tip


def test_deploy_to_production_keeps_merge_commit(repo: Path):
    workflow = _workflow(repo)
    workflow.start("feature/y")
    _commit(repo, "y.txt", "y\n")

    workflow.deploy("master", "feature/y")
    parents = _git(["rev-list", "--parents", "-n", "1", "master"], cwd=repo).split()
    assert len(parents) == 3


def test_deploy_refuses_unpulled_remote_changes(repo: Path):
    workflow = _workflow(repo)
    workflow.start("feature/z")
    _commit(repo, "z.txt", "z\n")
    _git(["update-ref", "refs/remotes/origin/stage", "HEAD"], cwd=repo)

    with pytest.raises(DivergedRemoteError):
        workflow.deploy("stage", "feature/z")
    assert _git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo) == "feature/z"
