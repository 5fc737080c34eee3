"""Git repository operations."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from git import GitCommandError, GitCommandNotFound, InvalidGitRepositoryError, NoSuchPathError, Repo

from branch_cleaner.exceptions import DeletionFailed, SourceUnavailable

logger = logging.getLogger(__name__)

CURRENT_MARKER = "*"
WORKTREE_MARKER = "+"


@dataclass(frozen=True)
class BranchListing:
    """Local branches as reported by git."""

    branches: list[str] = field(default_factory=list)
    current: Optional[str] = None


def parse_branch_list(output: str) -> BranchListing:
    """Parse the output of ``git branch --list``.

    Every line carries a two character prefix: ``* `` for the checked-out
    branch, ``+ `` for a branch checked out in another worktree and two
    spaces otherwise. A detached HEAD shows up as ``* (HEAD detached at ...)``
    and is not a branch.
    """
    branches: list[str] = []
    current: Optional[str] = None
    for line in output.splitlines():
        marker, name = line[:2].strip(), line[2:].strip()
        if not name or name.startswith("("):
            continue
        if marker == CURRENT_MARKER:
            current = name
        branches.append(name)
    return BranchListing(branches=branches, current=current)


def _git_message(err: GitCommandError) -> str:
    """Extract the useful part of a failed git command."""
    stderr = err.stderr.strip() if isinstance(err.stderr, str) else ""
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:") :].strip().strip("'").strip()
    return stderr or str(err)


class GitRepo:
    """Branch source and sink backed by a local git repository."""

    def __init__(self, path: Path) -> None:
        """Open the repository containing ``path``.

        Raises:
            SourceUnavailable: If ``path`` is not inside a usable repository
        """
        try:
            self.repo: Repo = Repo(path, search_parent_directories=True)
        except (InvalidGitRepositoryError, NoSuchPathError) as err:
            raise SourceUnavailable(f"Not a git repository: {path}") from err
        except GitCommandNotFound as err:
            raise SourceUnavailable("git executable not found") from err
        if self.repo.bare:
            raise SourceUnavailable("Cannot operate on bare repository")
        logger.debug("Opened repository at %s", self.repo.working_tree_dir)

    def list_branches(self) -> BranchListing:
        """List local branches and identify the current one.

        Raises:
            SourceUnavailable: If ``git branch`` cannot be run or fails
        """
        try:
            output = self.repo.git.branch("--list", "--no-color", "--no-column")
        except GitCommandNotFound as err:
            raise SourceUnavailable("git executable not found") from err
        except GitCommandError as err:
            raise SourceUnavailable(f"Failed to list branches: {_git_message(err)}") from err

        listing = parse_branch_list(output)
        logger.debug("Found %d local branches, current: %s", len(listing.branches), listing.current)
        return listing

    def delete_branch(self, branch_name: str) -> None:
        """Force delete a local branch.

        Raises:
            DeletionFailed: If git refuses to delete the branch
        """
        try:
            self.repo.git.branch("-D", branch_name)
        except GitCommandNotFound as err:
            raise DeletionFailed(branch_name, "git executable not found") from err
        except GitCommandError as err:
            raise DeletionFailed(branch_name, _git_message(err)) from err
        logger.info("Deleted branch %s", branch_name)
