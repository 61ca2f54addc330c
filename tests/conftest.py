"""Pytest configuration and fixtures."""

import os
import shutil
import subprocess
from pathlib import Path

import pytest
from fakes import FakeVCSBackend

from remote_url.core.models.remote import Protocol, RemoteDescriptor


@pytest.fixture
def fake_backend() -> FakeVCSBackend:
    """A github-hosted repository at /srv/site on branch main."""
    return FakeVCSBackend(
        root="/srv/site",
        remotes={"origin": "git@github.com:acme/site.git"},
        branch="main",
        tracked={"docs/intro.md", "README.md", "docs/guide/setup notes.md"},
    )


@pytest.fixture
def github_remote() -> RemoteDescriptor:
    return RemoteDescriptor(
        protocol=Protocol.HTTPS,
        host="github.com",
        path_to_repo="acme/site",
        branch="main",
    )


def _git(repo_path: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo_path, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a temporary Git repository with a github origin."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo_path = tmp_path / "site"
    repo_path.mkdir()

    _git(repo_path, "init")
    _git(repo_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo_path, "config", "user.email", "test@test.com")
    _git(repo_path, "config", "user.name", "Test")
    _git(repo_path, "config", "commit.gpgsign", "false")
    _git(repo_path, "remote", "add", "origin", "git@github.com:acme/site.git")

    (repo_path / "docs").mkdir()
    (repo_path / "docs" / "intro.md").write_text("# Intro\n")
    (repo_path / "README.md").write_text("# Site\n")

    _git(repo_path, "add", ".")
    _git(repo_path, "commit", "-m", "Initial commit")

    # Untracked file inside the working tree
    (repo_path / "docs" / "draft.md").write_text("# Draft\n")

    return Path(os.path.realpath(repo_path))
