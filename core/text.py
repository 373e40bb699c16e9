"""Whitespace trimming and delimiter splitting helpers."""
from __future__ import annotations

from typing import List


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""

    return text.strip()


def trim_right(text: str) -> str:
    """Strip trailing whitespace, keeping any leading indentation."""

    return text.rstrip()


def sep_split(text: str, sep: str) -> List[str]:
    """Split ``text`` on every ``sep`` and drop the empty pieces.

    Consecutive, leading and trailing separators never produce empty
    entries. An empty ``sep`` splits ``text`` into single characters.
    """

    if not sep:
        return list(text)
    return [part for part in text.split(sep) if part]


def comma_split(text: str) -> List[str]:
    return sep_split(text, ",")


__all__ = ["comma_split", "sep_split", "trim", "trim_right"]
