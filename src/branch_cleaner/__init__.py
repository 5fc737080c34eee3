"""Local git branch cleanup tool.

Features:
- Delete local branches that match none of the exclusion patterns
- Exact and trailing `/*` wildcard exclusion patterns
- Built-in standard branch set (master, main, develop, release/*)
- Dry run preview
- The current branch is never deleted
"""

__version__ = "0.3.0"
