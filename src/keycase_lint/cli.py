"""Command-line interface for keycase-lint."""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from keycase_lint.__version__ import __version__
from keycase_lint.config import Config
from keycase_lint.errors import KeyCaseLintError, UsageError
from keycase_lint.logging_config import get_logger, setup_logging
from keycase_lint.reporter import (
    PLAIN_STYLES,
    Styles,
    STYLES,
    format_detailed_report,
    format_error,
    format_json_report,
    get_exit_code,
)
from keycase_lint.scanner import scan_file
from keycase_lint.validation import validate_arguments

PROG_NAME = "keycase-lint"


def format_usage(prog_name: str, styles: Styles = STYLES) -> str:
    """Format usage message with an example invocation."""
    return "\n".join(
        [
            format_error(f"Usage: {prog_name} <erb_file_path>", styles),
            "",
            "Example:",
            f"  {prog_name} output/form_mappings/vba_21p_601.json.erb",
        ]
    )


@click.command()
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.argument("paths", nargs=-1, type=click.Path(readable=False))
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
@click.option("--color/--no-color", default=None, help="Force or disable colored output")
@click.option("--encoding", default="utf-8", show_default=True, help="Template file encoding")
@click.option(
    "--context-width", default=81, show_default=True, help="Context characters shown per line"
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", is_flag=True, help="Suppress warnings (errors only)")
def main(
    paths: tuple[str, ...],
    output_json: bool,
    color: bool | None,
    encoding: str,
    context_width: int,
    verbose: bool,
    quiet: bool,
) -> None:
    """Keycase-lint: flag camelCase keys in ERB form mapping templates."""
    setup_logging(verbose=verbose, quiet=quiet)
    styles = PLAIN_STYLES if color is False else STYLES

    try:
        file_arg = validate_arguments(paths)
    except UsageError:
        click.echo(format_usage(PROG_NAME, styles), color=color)
        sys.exit(1)

    try:
        cfg = Config(encoding=encoding, context_width=context_width)
    except ValidationError as e:
        click.echo(format_error(f"Error: Invalid option: {e}", styles), color=color)
        sys.exit(1)

    file_path = Path(file_arg)

    try:
        result = scan_file(file_path, cfg)

        if output_json:
            output = format_json_report(result, file_arg)
        else:
            output = format_detailed_report(result, file_arg, cfg, styles)

        click.echo(output, color=color)
        sys.exit(get_exit_code(result))

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user")
        sys.exit(130)  # Standard SIGINT exit code
    except KeyCaseLintError as e:
        click.echo(format_error(f"Error: {e}", styles), color=color)
        sys.exit(1)
    except Exception as e:
        logger = get_logger(__name__)
        logger.exception("Unexpected error during execution")
        click.echo(
            format_error(f"An unexpected error occurred: {e}", styles)
            + "\nRun with --verbose for details.",
            color=color,
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
