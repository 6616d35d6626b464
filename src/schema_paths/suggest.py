"""Edit-distance suggestions for unresolvable paths.

Only used on the failure path of ``resolve``: when a requested path is not
in the flattened map, the closest known paths are attached to the
``PathNotFound`` error.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["path_similarity", "suggest_paths"]

DEFAULT_CUTOFF = 0.6
DEFAULT_LIMIT = 3


def _levenshtein_distance(a: str, b: str) -> int:
    """Compute the Levenshtein (edit) distance between two strings.

    Rolling-row dynamic programming; the shorter string is kept on the inner
    loop to minimise the row allocation.
    """
    if a == b:
        return 0

    if len(a) < len(b):
        a, b = b, a

    if len(b) == 0:
        return len(a)

    prev_row = list(range(len(b) + 1))

    for i, ch_a in enumerate(a):
        curr_row = [i + 1] + [0] * len(b)
        for j, ch_b in enumerate(b):
            insert_cost = curr_row[j] + 1
            delete_cost = prev_row[j + 1] + 1
            replace_cost = prev_row[j] + (0 if ch_a == ch_b else 1)
            curr_row[j + 1] = min(insert_cost, delete_cost, replace_cost)
        prev_row = curr_row

    return prev_row[len(b)]


def path_similarity(a: str, b: str) -> float:
    """Return ``1 - levenshtein(a, b) / max(len(a), len(b), 1)``.

    Paths are compared verbatim; ``.``, ``[`` and ``]`` count as ordinary
    characters.
    """
    distance = _levenshtein_distance(a, b)
    denom = max(len(a), len(b), 1)
    return 1.0 - distance / denom


def suggest_paths(
    path: str,
    candidates: Iterable[str],
    limit: int = DEFAULT_LIMIT,
    cutoff: float = DEFAULT_CUTOFF,
) -> list[str]:
    """Return up to ``limit`` candidates scoring at least ``cutoff``, best first.

    Ties keep the candidates' original order.
    """
    scored = [
        (score, index, candidate)
        for index, candidate in enumerate(candidates)
        if (score := path_similarity(path, candidate)) >= cutoff
    ]
    scored.sort(key=lambda entry: (-entry[0], entry[1]))
    return [candidate for _, _, candidate in scored[:limit]]
