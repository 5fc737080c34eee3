"""Logging configuration for branch-cleaner."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Logs and errors go to stderr, results to stdout
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure the root logger.

    Args:
        verbose: Show INFO level messages
        debug: Show DEBUG level messages with timestamps and source locations
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=err_console,
        show_time=debug,
        show_path=debug,
        show_level=True,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)
    # GitPython logs every command at DEBUG
    logging.getLogger("git").setLevel(logging.INFO if debug else logging.WARNING)
