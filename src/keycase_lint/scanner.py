"""Key-case scanning of template files."""
from collections.abc import Iterable
from pathlib import Path

from keycase_lint.casing import is_camel_case, suggest_snake_case
from keycase_lint.config import Config, get_default_config
from keycase_lint.errors import ReadError
from keycase_lint.extractors import candidate_keys
from keycase_lint.logging_config import get_logger
from keycase_lint.types import ScanResult, Violation
from keycase_lint.validation import validate_target_path

logger = get_logger(__name__)


def scan_line(line: str, line_number: int) -> list[Violation]:
    """Find camelCase keys in a single line.

    Args:
        line: Raw source line
        line_number: 1-based line number

    Returns:
        Violations in dig-call then bracket order
    """
    context = line.strip()
    return [
        Violation(
            line_number=line_number,
            offending_key=key,
            suggested_key=suggest_snake_case(key),
            context=context,
        )
        for key in candidate_keys(line)
        if is_camel_case(key)
    ]


def scan_lines(lines: Iterable[str]) -> ScanResult:
    """Scan lines top to bottom.

    Args:
        lines: Source lines, e.g. an open file

    Returns:
        ScanResult counting every line read
    """
    violations: list[Violation] = []
    line_count = 0

    for line_count, line in enumerate(lines, start=1):
        violations.extend(scan_line(line, line_count))

    return ScanResult(total_lines_scanned=line_count, violations=tuple(violations))


def scan_file(file_path: Path, config: Config | None = None) -> ScanResult:
    """Validate and scan a template file.

    Args:
        file_path: File to scan
        config: Scan settings, defaults when omitted

    Returns:
        ScanResult for the whole file

    Raises:
        NotFoundError: If the file does not exist
        UnreadableError: If the file cannot be read
        ReadError: If opening or reading fails part way
    """
    config = config or get_default_config()
    validate_target_path(file_path)

    logger.info(f"Scanning {file_path} ({config.encoding})")
    try:
        # split on \n only; a lone \r stays inside its line
        with file_path.open(encoding=config.encoding, newline="\n") as f:
            result = scan_lines(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(file_path, e) from e

    logger.info(
        f"Scanned {result.total_lines_scanned} line(s), "
        f"found {result.violation_count} violation(s)"
    )
    return result
