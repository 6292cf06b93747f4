"""Report formatting and output."""
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import click

from keycase_lint.config import Config, get_default_config
from keycase_lint.types import ScanResult

Styles = Mapping[str, Mapping[str, Any]]

STYLES: Styles = {
    "error": {"fg": "red"},
    "success": {"fg": "green"},
    "warning": {"fg": "yellow", "bold": True},
    "plain": {},
}

PLAIN_STYLES: Styles = {label: {} for label in STYLES}


def paint(text: str, label: str, styles: Styles = STYLES) -> str:
    """Wrap text in the ANSI style registered for a semantic label.

    Args:
        text: Text to style
        label: One of error, success, warning, plain
        styles: Label to click.style keyword mapping

    Returns:
        Styled text, unchanged when the label has no style
    """
    style = styles.get(label)
    if not style:
        return text
    return click.style(text, **style)


def truncate_context(context: str, width: int) -> str:
    """Shorten a context line to width characters, marking the cut with '...'."""
    if len(context) <= width:
        return context
    return f"{context[:width]}..."


def quote_key(key: str) -> str:
    """Wrap a key in single quotes as it appears in the template."""
    return f"'{key}'"


def format_detailed_report(
    result: ScanResult,
    file_path: Path | str,
    config: Config | None = None,
    styles: Styles = STYLES,
) -> str:
    """Format scan result as human-readable report.

    Args:
        result: Result of scanning file_path
        file_path: Scanned file, as given by the user
        config: Settings for context width and tips
        styles: Label to style mapping

    Returns:
        Formatted report string
    """
    config = config or get_default_config()
    lines = []

    if not result.has_violations:
        lines.append(
            paint(f"[OK] All keys in {file_path} are properly snake_cased!", "success", styles)
        )
        lines.append("")
        lines.append(f"Total lines scanned: {result.total_lines_scanned}")
        return "\n".join(lines)

    lines.append(
        paint(
            f"[FAIL] Found {result.violation_count} camelCase violation(s) in {file_path}:",
            "error",
            styles,
        )
    )
    lines.append("")

    for violation in result.violations:
        lines.append(f"  {paint(f'Line {violation.line_number}:', 'error', styles)}")
        lines.append(f"    camelCase: {paint(quote_key(violation.offending_key), 'error', styles)}")
        lines.append(
            f"    should be: {paint(quote_key(violation.suggested_key), 'success', styles)}"
        )
        lines.append(f"    Context:   {truncate_context(violation.context, config.context_width)}")
        lines.append("")

    for tip in config.tips:
        lines.append(f"{paint('Tip:', 'warning', styles)} {tip}")
    lines.append("")

    return "\n".join(lines)


def format_json_report(result: ScanResult, file_path: Path | str) -> str:
    """Format scan result as JSON.

    Args:
        result: Result of scanning file_path
        file_path: Scanned file

    Returns:
        JSON string
    """
    report = {
        "file": str(file_path),
        **result.to_dict(),
        "summary": {"total_violations": result.violation_count},
    }

    return json.dumps(report, indent=2)


def format_error(message: str, styles: Styles = STYLES) -> str:
    """Format an error message line."""
    return paint(message, "error", styles)


def get_exit_code(result: ScanResult) -> int:
    """Get exit code based on result.

    Args:
        result: Scan result

    Returns:
        0 if no violations, 1 if violations found
    """
    return 1 if result.has_violations else 0
