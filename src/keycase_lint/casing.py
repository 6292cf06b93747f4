"""camelCase detection and snake_case suggestions."""
import re

# lowercase letter directly followed by an uppercase letter
CAMEL_HUMP = re.compile(r"([a-z])([A-Z])")


def is_camel_case(key: str) -> bool:
    """Check whether a key contains at least one camel-hump boundary.

    Args:
        key: Key text to check

    Returns:
        True if the key contains a lowercase letter followed by an uppercase one
    """
    return CAMEL_HUMP.search(key) is not None


def suggest_snake_case(key: str) -> str:
    """Rewrite a camelCase key as snake_case.

    Inserts an underscore at every hump in a single non-overlapping pass and
    lowercases the result. The output is not re-checked.

    Args:
        key: Key to rewrite

    Returns:
        Suggested snake_case key
    """
    return CAMEL_HUMP.sub(r"\1_\2", key).lower()
