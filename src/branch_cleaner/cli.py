"""Command line interface for branch-cleaner."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from branch_cleaner import __version__
from branch_cleaner.cleaner import CleanResult, delete_branches
from branch_cleaner.exceptions import BranchCleanerError, InvalidArguments
from branch_cleaner.filters import STANDARD_BRANCHES, build_exclude_patterns, select_branches
from branch_cleaner.git import GitRepo
from branch_cleaner.logging_config import err_console, setup_logging

logger = logging.getLogger(__name__)

EXCLUDE_PREFIX = "--exclude:"

EPILOG = f"""Standard branches protected by --standard: {', '.join(STANDARD_BRANCHES)}

Examples:

git-branch-cleaner --standard --exclude:feature/* --exclude:bugfix/*

git-branch-cleaner --all

git-branch-cleaner --dry-run --standard
"""

app = typer.Typer(
    help="Delete local git branches that match none of the exclusion patterns.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)
console = Console()


class CleanCommand(TyperCommand):
    """Accepts the ``--exclude:<pattern>`` spelling next to ``--exclude <pattern>``."""

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        args = [f"--exclude={arg[len(EXCLUDE_PREFIX) :]}" if arg.startswith(EXCLUDE_PREFIX) else arg for arg in args]
        return super().parse_args(ctx, args)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-branch-cleaner {__version__}")
        raise typer.Exit()


def print_error(err: BranchCleanerError) -> None:
    err_console.print(f"[red]Error:[/red] {escape(str(err))}", soft_wrap=True)


def print_usage_error(ctx: typer.Context, err: InvalidArguments) -> None:
    """Report a command line mistake together with the usage line."""
    err_console.print(escape(ctx.get_usage()), soft_wrap=True)
    err_console.print(f"Try '{escape(ctx.command_path)} --help' for help.", soft_wrap=True)
    print_error(err)


def report(result: CleanResult) -> None:
    """Print the outcome of a deletion run."""
    if result.dry_run:
        console.print("Dry Run: The following branches would be deleted:")
        for branch in result.deleted:
            console.print(escape(branch), soft_wrap=True)
        return

    if result.deleted:
        console.print(f"Branches deleted: {escape(', '.join(result.deleted))}", soft_wrap=True)
    elif result.ok:
        console.print("[green]No branches to delete[/green]")

    if not result.ok:
        err_console.print(f"[red]Failed to delete {len(result.failed)} branch(es):[/red]")
        for failure in result.failed:
            err_console.print(f"  {escape(failure.branch)}: {escape(failure.cause)}", soft_wrap=True)


@app.command(cls=CleanCommand, epilog=EPILOG)
def clean(
    ctx: typer.Context,
    standard: Annotated[
        bool, typer.Option("--standard", help="Protect the standard branches (master, main, develop, release/*).")
    ] = False,
    exclude: Annotated[
        Optional[list[str]],
        typer.Option(
            "--exclude",
            metavar="PATTERN",
            help="Protect a branch or a prefix pattern like feature/*. Also spelled --exclude:<pattern>. Repeatable.",
        ),
    ] = None,
    delete_all: Annotated[
        bool, typer.Option("--all", help="Delete every branch except the current one. Only combines with --dry-run.")
    ] = False,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show what would be deleted without deleting.")] = False,
    path: Annotated[Path, typer.Option(help="Path to git repository")] = Path("."),
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show progress messages.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Show debug messages.")] = False,
    version: Annotated[
        Optional[bool], typer.Option("--version", callback=version_callback, is_eager=True, help="Show the version.")
    ] = None,
) -> None:
    """Delete local branches that match none of the exclusion patterns.

    The current branch is never deleted. With --standard or --exclude the run
    is refused if the current branch is not covered by a pattern.
    """
    excludes = exclude or []
    if not (standard or excludes or delete_all):
        typer.echo(ctx.get_help())
        raise typer.Exit()

    setup_logging(verbose=verbose, debug=debug)

    try:
        patterns = build_exclude_patterns(standard, excludes, delete_all)
    except InvalidArguments as err:
        print_usage_error(ctx, err)
        raise typer.Exit(code=2) from err
    logger.info("Exclusion patterns: %s", ", ".join(patterns) or "none")

    try:
        repo = GitRepo(path)
        listing = repo.list_branches()
        to_delete = select_branches(listing.branches, patterns, listing.current, delete_all=delete_all)
        logger.info("Selected %d of %d branches for deletion", len(to_delete), len(listing.branches))
    except BranchCleanerError as err:
        print_error(err)
        raise typer.Exit(code=1) from err

    result = delete_branches(repo, to_delete, dry_run=dry_run)
    report(result)
    if not result.ok:
        raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
