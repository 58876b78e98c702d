"""Greedy scheduling."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["min_platforms"]


def min_platforms(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Fewest platforms so no train waits; an arrival at a departure's time needs its own."""
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    # 0 sorts before 1, so arrivals come first when times are equal.
    events = sorted([(time, 0) for time in arrivals] + [(time, 1) for time in departures])
    platforms = occupied = 0
    for _, kind in events:
        occupied += 1 if kind == 0 else -1
        platforms = max(platforms, occupied)
    return platforms