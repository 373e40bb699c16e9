"""Helpers for integer sequences."""
from __future__ import annotations

from typing import Dict, Iterable, List


def unique_ints(values: Iterable[int], sort: bool = False) -> List[int]:
    """Return the distinct integers of ``values``.

    Without ``sort`` the result keeps the order in which each value first
    appears; with it the result is ascending.
    """

    seen: Dict[int, None] = dict.fromkeys(values)
    if sort:
        return sorted(seen)
    return list(seen)


__all__ = ["unique_ints"]
