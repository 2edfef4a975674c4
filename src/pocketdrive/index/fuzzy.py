# Fuzzy file-name matching.
# Created: 2026-10-19

from __future__ import annotations

import os

from rapidfuzz.distance import Levenshtein

MAX_EDIT_DISTANCE = 2


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance (single-character insert/delete/substitute)."""
    return Levenshtein.distance(a, b)


def matches(candidate_name: str, query: str, max_distance: int = MAX_EDIT_DISTANCE) -> bool:
    """Case-insensitive substring containment OR edit distance <= *max_distance*.

    The distance is taken against the full name and against the name without
    its extension, whichever is smaller, so ``repot`` finds ``report.pdf``.
    This deliberately widens plain full-name matching: comparing full names
    only would put every typed stem at least the extension's length away.
    """
    name = candidate_name.casefold()
    q = query.casefold()
    if q in name:
        return True

    stem, _ext = os.path.splitext(name)
    for target in {name, stem}:
        if Levenshtein.distance(target, q, score_cutoff=max_distance) <= max_distance:
            return True
    return False
