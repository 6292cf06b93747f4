"""Exceptions raised by keycase-lint.

Every error here is terminal: the CLI prints its message and exits with 1.
"""
from pathlib import Path


class KeyCaseLintError(Exception):
    """Base class for keycase-lint errors."""


class UsageError(KeyCaseLintError):
    """Wrong number of command-line arguments."""


class NotFoundError(KeyCaseLintError):
    """Target path does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File not found: {path}")


class UnreadableError(KeyCaseLintError):
    """Target path exists but cannot be read by this process."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File is not readable: {path}")


class ReadError(KeyCaseLintError):
    """I/O or decoding failure while streaming the file."""

    def __init__(self, path: Path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading file: {cause}")
