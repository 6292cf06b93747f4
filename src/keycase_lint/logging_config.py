"""Diagnostics logging for keycase-lint.

Reports and error messages are written to stdout by the CLI. Log records are
diagnostics only, so they go to stderr with a program prefix and never mix
into a report that is piped or parsed as JSON.
"""
import logging
import sys
from typing import TextIO

NAMESPACE = "keycase_lint"

LOG_FORMAT = "keycase-lint: %(levelname)s: %(message)s"
# --verbose also names the emitting module
VERBOSE_LOG_FORMAT = "keycase-lint: %(levelname)s [%(name)s] %(message)s"


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level.

    --quiet wins over --verbose when both are given.
    """
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(verbose: bool = False, quiet: bool = False, stream: TextIO | None = None) -> None:
    """Route package log records to stderr.

    Args:
        verbose: Log scan progress (INFO)
        quiet: Log errors only
        stream: Destination, sys.stderr at call time when omitted
    """
    level = resolve_level(verbose=verbose, quiet=quiet)

    logger = logging.getLogger(NAMESPACE)
    logger.setLevel(level)
    logger.propagate = False

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(VERBOSE_LOG_FORMAT if verbose else LOG_FORMAT))

    # Repeated CLI invocations in one process replace the previous handler
    logger.handlers[:] = [handler]


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the keycase_lint namespace."""
    if name != NAMESPACE and not name.startswith(f"{NAMESPACE}."):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)
