"""Case and separator insensitive matching for curve names.

Names like "InCubic", "in-cubic", "IN_CUBIC" and "in cubic" all denote the
same curve. Matching consumes the "in"/"out" prefixes (plus any separators
after them) and then requires the remainder to equal a family name exactly,
so "inside" is not read as "in" + "side".
"""

from __future__ import annotations

SEPARATORS = frozenset(" -_")


def equals_ignore_case(s1: str, s2: str) -> bool:
    """Return whether two strings are equal, ignoring case."""
    if len(s1) != len(s2):
        return False
    return all(a.lower() == b.lower() for a, b in zip(s1, s2))


def has_prefix_ignore_case(s: str, prefix: str) -> bool:
    """Return whether ``s`` starts with ``prefix``, ignoring case."""
    if len(s) < len(prefix):
        return False
    return equals_ignore_case(s[: len(prefix)], prefix)


def consume_prefix_ignore_case(s: str, prefix: str) -> str | None:
    """Strip ``prefix`` and any separators following it from ``s``.

    Args:
        s: String to consume from.
        prefix: Prefix to match, ignoring case.

    Returns:
        The remainder of ``s``, or None if ``s`` does not start with ``prefix``.

    Example:
        >>> consume_prefix_ignore_case("IN__cubic", "in")
        'cubic'
        >>> consume_prefix_ignore_case("cubic", "in") is None
        True
    """
    if not has_prefix_ignore_case(s, prefix):
        return None
    rest = s[len(prefix) :]
    i = 0
    while i < len(rest) and rest[i] in SEPARATORS:
        i += 1
    return rest[i:]
