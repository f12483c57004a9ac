"""Cuisine consensus ranking."""

from collections import Counter
from collections.abc import Iterable

from tablemate.models import Cuisine, PersonPreferences

MAX_TOP_CUISINES = 3


def count_cuisines(participants: Iterable[PersonPreferences]) -> Counter[Cuisine]:
    """Count how many participants list each cuisine as a favorite."""
    counts: Counter[Cuisine] = Counter()
    for person in participants:
        counts.update(person.favorite_cuisines)
    return counts


def compute_top_cuisines(
    participants: Iterable[PersonPreferences],
    limit: int = MAX_TOP_CUISINES,
) -> list[Cuisine]:
    """
    Rank cuisines by how many participants favor them.

    Ties are broken by the canonical Cuisine order so the ranking is
    reproducible.
    """
    counts = count_cuisines(participants)
    ranked = sorted(
        (cuisine for cuisine, count in counts.items() if count > 0),
        key=lambda cuisine: (-counts[cuisine], cuisine.index),
    )
    return ranked[: max(limit, 0)]
