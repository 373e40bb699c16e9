"""Levelled console output used for diagnostics."""
from __future__ import annotations

import sys


class Console:
    """Simple console output handler with configurable log level.

    Levels: none < error < info < debug
    Default: 'none' (no output)
    """

    LEVELS = {
        "none": 0,
        "error": 1,
        "info": 2,
        "debug": 3,
    }

    def __init__(self, level: str = "none"):
        if level not in self.LEVELS:
            supported = ", ".join(self.LEVELS)
            raise ValueError(f"Unknown console level '{level}'. Supported: {supported}")
        self.level_name = level
        self.level = self.LEVELS[level]

    def enabled(self, level: str) -> bool:
        return self.level >= self.LEVELS[level]

    def error(self, message: str) -> None:
        if self.enabled("error"):
            print(f"[ERROR] {message}", file=sys.stderr)

    def debug(self, message: str) -> None:
        if self.enabled("debug"):
            print(f"[DEBUG] {message}")


__all__ = ["Console"]
