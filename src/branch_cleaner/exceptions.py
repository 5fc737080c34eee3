"""Errors raised by branch-cleaner."""


class BranchCleanerError(Exception):
    """Base class for all branch-cleaner errors."""


class SourceUnavailable(BranchCleanerError):
    """Branches could not be listed (not a repository, git missing, ...)."""


class InvalidArguments(BranchCleanerError):
    """Conflicting or malformed command line arguments."""


class CurrentBranchProtected(BranchCleanerError):
    """The computed deletion set contains the checked-out branch."""

    def __init__(self, branch: str) -> None:
        """Initialize error.

        Args:
            branch: Name of the current branch
        """
        super().__init__(
            f"Refusing to continue: the current branch '{branch}' would be deleted. "
            f"Switch to another branch or add --exclude:{branch}"
        )
        self.branch = branch


class DeletionFailed(BranchCleanerError):
    """A single branch could not be deleted."""

    def __init__(self, branch: str, cause: str) -> None:
        """Initialize error.

        Args:
            branch: Name of the branch that was not deleted
            cause: Reason reported by git
        """
        super().__init__(f"Failed to delete branch '{branch}': {cause}")
        self.branch = branch
        self.cause = cause
