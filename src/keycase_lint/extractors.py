"""Candidate key extraction from template lines."""
import re
from collections.abc import Iterator

# form.data.dig('veteran', 'first_name')
DIG_CALL = re.compile(r"form\.data\.dig\(([^)]+)\)")
QUOTED = re.compile(r"'([^']+)'")

# expenses[0]['expense_type'], any receiver
BRACKET_SUBSCRIPT = re.compile(r"\['([^']+)'\]")


def dig_call_keys(line: str) -> Iterator[str]:
    """Yield every single-quoted argument of each form.data.dig(...) call.

    Args:
        line: Source line

    Yields:
        Candidate keys in order of appearance
    """
    for call in DIG_CALL.finditer(line):
        for quoted in QUOTED.finditer(call.group(1)):
            yield quoted.group(1)


def bracket_keys(line: str) -> Iterator[str]:
    """Yield the text of every ['...'] subscript in the line.

    Args:
        line: Source line

    Yields:
        Candidate keys in order of appearance
    """
    for match in BRACKET_SUBSCRIPT.finditer(line):
        yield match.group(1)


def candidate_keys(line: str) -> Iterator[str]:
    """Yield dig-call keys, then bracket keys. Duplicates are kept."""
    yield from dig_call_keys(line)
    yield from bracket_keys(line)
