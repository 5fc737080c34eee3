"""Test configuration and fixtures."""

from pathlib import Path
from typing import Generator

import pytest
from git import Actor, Repo
from typer.testing import CliRunner

BRANCHES = ["develop", "feature/x", "feature/y", "prerelease/1.0", "release/1.0"]


@pytest.fixture
def test_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a repository with a handful of branches.

    Branches: main, develop, feature/x, feature/y, prerelease/1.0, release/1.0.
    feature/x is checked out.

    Returns:
        Path to the repository
    """
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    repo = Repo.init(repo_path)

    # Set up git config
    author = Actor("Test User", "test@example.com")
    repo.config_writer().set_value("user", "name", author.name).release()
    repo.config_writer().set_value("user", "email", author.email).release()

    # Create initial commit and make sure the default branch is called main
    readme = repo_path / "README.md"
    readme.write_text("# Test Repository")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit", author=author, committer=author)
    if repo.active_branch.name != "main":
        repo.active_branch.rename("main")

    for name in BRANCHES:
        repo.create_head(name)

    # Give feature/y a commit that is not merged anywhere
    repo.heads["feature/y"].checkout()
    work = repo_path / "work.txt"
    work.write_text("Unmerged work")
    repo.index.add(["work.txt"])
    repo.index.commit("Add work", author=author, committer=author)

    repo.heads["feature/x"].checkout()

    yield repo_path

    # Cleanup is handled by pytest's tmp_path fixture


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


def local_branches(path: Path) -> list[str]:
    """Names of the local branches in a repository."""
    return sorted(head.name for head in Repo(path).heads)
