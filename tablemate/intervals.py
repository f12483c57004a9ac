"""Intersection and merging of time intervals."""

from collections.abc import Iterable

from tablemate.models import TimeInterval


def intersect(a: TimeInterval, b: TimeInterval) -> TimeInterval | None:
    """
    Return the overlap of two intervals.

    Returns None when the intervals do not overlap or only touch, since a
    zero-length overlap is not a usable meeting window.
    """
    start = max(a.start, b.start)
    end = min(a.end, b.end)
    if start < end:
        return TimeInterval(start=start, end=end)
    return None


def intersect_all(
    set_a: Iterable[TimeInterval],
    set_b: Iterable[TimeInterval],
) -> list[TimeInterval]:
    """
    Intersect every interval of set_a with every interval of set_b.

    Returns the raw hits in cross-product order; they may overlap and are not
    sorted. Interval counts per person per day are small, so the quadratic
    scan is fine.
    """
    set_b = list(set_b)
    hits: list[TimeInterval] = []
    for a in set_a:
        for b in set_b:
            overlap = intersect(a, b)
            if overlap is not None:
                hits.append(overlap)
    return hits


def merge_overlapping(intervals: Iterable[TimeInterval]) -> list[TimeInterval]:
    """Merge overlapping or touching intervals into a sorted, disjoint list."""
    ordered = sorted(intervals, key=lambda iv: (iv.start, iv.end))
    if not ordered:
        return []

    merged: list[TimeInterval] = []
    current = ordered[0]
    for interval in ordered[1:]:
        if interval.start <= current.end:
            if interval.end > current.end:
                current = TimeInterval(start=current.start, end=interval.end)
        else:
            merged.append(current)
            current = interval
    merged.append(current)

    return merged
