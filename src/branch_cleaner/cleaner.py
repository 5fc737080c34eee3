"""Branch deletion runs."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from branch_cleaner.exceptions import DeletionFailed

logger = logging.getLogger(__name__)


class BranchSink(Protocol):
    """Anything that can delete a branch by name."""

    def delete_branch(self, branch_name: str) -> None: ...


@dataclass
class CleanResult:
    """Outcome of a deletion run.

    In a dry run ``deleted`` lists the branches that would have been deleted.
    """

    dry_run: bool = False
    deleted: list[str] = field(default_factory=list)
    failed: list[DeletionFailed] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def delete_branches(sink: BranchSink, branches: Sequence[str], dry_run: bool = False) -> CleanResult:
    """Delete branches one at a time, in order.

    A failed deletion is recorded and the remaining branches are still
    processed. Nothing is touched in a dry run.

    Args:
        sink: Where branches get deleted
        branches: Branches to delete
        dry_run: Only report what would be deleted

    Returns:
        Deleted (or would-be deleted) branches and the failures
    """
    result = CleanResult(dry_run=dry_run)
    for branch in branches:
        if dry_run:
            logger.debug("Dry run, keeping %s", branch)
            result.deleted.append(branch)
            continue
        try:
            sink.delete_branch(branch)
        except DeletionFailed as err:
            logger.info("%s", err)
            result.failed.append(err)
            continue
        result.deleted.append(branch)
    return result
