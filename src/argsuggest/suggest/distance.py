"""Edit distance between identifiers."""

from __future__ import annotations


def levenshtein_distance(a: str, b: str) -> int:
    """
    Return the Levenshtein distance between two strings, ignoring case.

    Counts the single-character insertions, deletions and substitutions needed
    to turn ``a`` into ``b``. A single row of costs is kept and rewritten for
    every character of ``a``.

    Args:
        a: The first string to compare.
        b: The second string to compare.

    Returns:
        The distance between the strings.
    """
    a, b = a.lower(), b.lower()
    costs = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        # diagonal holds the cost from the previous row, one column to the left
        diagonal = costs[0]
        costs[0] = i
        for j in range(1, len(b) + 1):
            substitution = diagonal if a[i - 1] == b[j - 1] else diagonal + 1
            diagonal = costs[j]
            costs[j] = min(costs[j] + 1, costs[j - 1] + 1, substitution)
    return costs[len(b)]
