"""Keycase-lint: camelCase key checker for ERB form mapping templates."""

from keycase_lint.__version__ import __version__
from keycase_lint.config import Config, get_default_config
from keycase_lint.errors import (
    KeyCaseLintError,
    NotFoundError,
    ReadError,
    UnreadableError,
    UsageError,
)
from keycase_lint.scanner import scan_file, scan_lines
from keycase_lint.types import ScanResult, Violation

__all__ = [
    "__version__",
    "Config",
    "get_default_config",
    "scan_file",
    "scan_lines",
    "KeyCaseLintError",
    "UsageError",
    "NotFoundError",
    "UnreadableError",
    "ReadError",
    "ScanResult",
    "Violation",
]
