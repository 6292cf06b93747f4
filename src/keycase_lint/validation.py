"""Input validation functions."""
import os
from pathlib import Path

from keycase_lint.errors import NotFoundError, UnreadableError, UsageError


def validate_arguments(args: tuple[str, ...] | list[str]) -> str:
    """Validate positional arguments.

    Args:
        args: Positional arguments given on the command line

    Returns:
        The single file path argument

    Raises:
        UsageError: If not exactly one argument was given
    """
    if len(args) != 1:
        raise UsageError(f"Expected exactly one file path, got {len(args)}")
    return args[0]


def validate_target_path(path: Path) -> None:
    """Validate the file to scan exists and is readable.

    Args:
        path: Path to validate

    Raises:
        NotFoundError: If path does not exist
        UnreadableError: If path cannot be read by this process
    """
    if not path.exists():
        raise NotFoundError(path)

    if not os.access(path, os.R_OK):
        raise UnreadableError(path)
