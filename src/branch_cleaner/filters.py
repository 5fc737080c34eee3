"""Branch selection.

Pure functions over branch names: no git access and no side effects. The CLI
turns its flags into a list of exclusion patterns, the repository supplies the
branch listing, and `select_branches` decides what gets deleted.

Two kinds of exclusion pattern are supported:

- an exact branch name, e.g. ``develop``
- a trailing wildcard, e.g. ``release/*``, which protects every branch below
  ``release/`` but not ``release`` itself, ``releases/1.0`` or ``prerelease/1.0``
"""

from collections.abc import Iterable, Sequence
from typing import Optional

from branch_cleaner.exceptions import CurrentBranchProtected, InvalidArguments

STANDARD_BRANCHES: tuple[str, ...] = ("master", "main", "develop", "release/*")

WILDCARD_SUFFIX = "/*"


def matches_pattern(branch: str, pattern: str) -> bool:
    """Check whether a branch is protected by a single exclusion pattern."""
    if pattern.endswith(WILDCARD_SUFFIX):
        # Keep the separator so that "foo/*" does not match "foo" or "foobar"
        return branch.startswith(pattern[:-1])
    return branch == pattern


def filter_branches(branches: Iterable[str], exclude_patterns: Sequence[str]) -> list[str]:
    """Return the branches that match none of the exclusion patterns.

    Input order and duplicates are preserved.

    Args:
        branches: Branch names, in the order git reported them
        exclude_patterns: Exact names or trailing ``/*`` wildcards

    Returns:
        The branches eligible for deletion
    """
    return [branch for branch in branches if not any(matches_pattern(branch, p) for p in exclude_patterns)]


def enforce_current_branch_safety(eligible: Sequence[str], current: Optional[str]) -> list[str]:
    """Refuse a deletion set that contains the current branch.

    Args:
        eligible: Branches selected for deletion
        current: The checked-out branch, or None on a detached HEAD

    Returns:
        A copy of ``eligible``

    Raises:
        CurrentBranchProtected: If ``current`` is part of ``eligible``
    """
    if current is not None and current in eligible:
        raise CurrentBranchProtected(current)
    return list(eligible)


def build_exclude_patterns(
    standard: bool,
    excludes: Sequence[str],
    delete_all: bool = False,
    standard_branches: Sequence[str] = STANDARD_BRANCHES,
) -> list[str]:
    """Turn the command line choices into a list of exclusion patterns.

    ``delete_all`` yields no patterns at all; the current branch is kept out
    of the deletion set by `select_branches`.

    Args:
        standard: Whether to protect the standard branches
        excludes: Patterns given with ``--exclude``
        delete_all: Delete everything except the current branch
        standard_branches: Patterns added by ``standard``

    Returns:
        Exclusion patterns, in the order they were requested

    Raises:
        InvalidArguments: If ``delete_all`` is combined with other filters or a pattern is empty
    """
    if delete_all:
        if standard or excludes:
            raise InvalidArguments("--all can only be used alone or with --dry-run.")
        return []

    patterns: list[str] = []
    if standard:
        patterns.extend(standard_branches)
    for pattern in excludes:
        if not pattern:
            raise InvalidArguments("--exclude needs a branch name or pattern, e.g. --exclude:feature/*")
        patterns.append(pattern)
    return patterns


def select_branches(
    branches: Sequence[str],
    patterns: Sequence[str],
    current: Optional[str],
    delete_all: bool = False,
) -> list[str]:
    """Compute the branches to delete.

    In ``delete_all`` mode the current branch is excluded implicitly. In every
    other mode it has to be covered by a pattern, otherwise the whole run is
    refused.

    Raises:
        CurrentBranchProtected: If the current branch would be deleted
    """
    if delete_all and current:
        patterns = [*patterns, current]
    return enforce_current_branch_safety(filter_branches(branches, patterns), current)
