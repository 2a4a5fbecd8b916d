"""Parsing of comma-delimited mention lists stored on a receiver."""

from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """Return ``True`` for ``None``, empty, or whitespace-only strings."""
    return value is None or not value.strip()


def parse_mention_list(raw: Optional[str]) -> list[str]:
    """Split a comma-separated id string into trimmed tokens.

    Token order follows the input and duplicates are kept.  Inner empty
    tokens are kept (``"a,,b"`` gives ``["a", "", "b"]``); trailing empty
    tokens are dropped.

    Args:
        raw: Raw receiver field such as ``"138001,  138002"``.

    Returns:
        List of ids, empty when *raw* is blank.
    """
    if is_blank(raw):
        return []
    tokens = [token.strip() for token in raw.split(",")]
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens
