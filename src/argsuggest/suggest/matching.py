"""Pick the closest candidate for an unrecognized argument."""

from __future__ import annotations

from collections.abc import Iterable

from argsuggest.suggest.distance import levenshtein_distance


def select_suggestion(token: str, candidates: Iterable[str]) -> str | None:
    """
    Return the candidate closest to token, or None if there are no candidates.

    No cutoff is applied: any non-empty candidate list yields a suggestion.
    When several candidates share the smallest distance, the first one in
    candidate order wins.
    """
    best: str | None = None
    best_distance = 0
    for candidate in candidates:
        distance = levenshtein_distance(token, candidate)
        if best is None or distance < best_distance:
            best = candidate
            best_distance = distance
    return best


def rank_candidates(token: str, candidates: Iterable[str]) -> list[tuple[str, int]]:
    """
    Pair every candidate with its distance to token, closest first.

    The sort is stable, so candidates at equal distance keep their input order
    and the first entry always agrees with ``select_suggestion``.
    """
    scored = [
        (candidate, levenshtein_distance(token, candidate)) for candidate in candidates
    ]
    return sorted(scored, key=lambda item: item[1])
