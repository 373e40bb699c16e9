"""Filesystem existence checks and path expansion."""
from __future__ import annotations

import os

from .environment import EnvironmentResolver, SystemEnvironment


def exists(path: str) -> bool:
    """Return ``True`` when anything exists at ``path``.

    Any failure to stat the path, including malformed input, counts as
    absence.
    """

    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def expand_path(path: str, *, environment: EnvironmentResolver | None = None) -> str:
    """Expand ``path`` into an absolute, normalized path.

    A leading ``~`` is replaced by the current user's home directory and
    whatever follows it is taken relative to that home. Other relative
    paths are resolved against the working directory. The empty string is
    returned unchanged.

    Raises:
        UserLookupError: the current user or its home directory cannot be determined.
    """

    if not path:
        return ""

    resolver = environment or SystemEnvironment()

    if path.startswith("~"):
        home = resolver.home_dir()
        return os.path.normpath(os.path.join(home, path[1:].lstrip("/")))

    if os.path.isabs(path):
        return os.path.normpath(path)
    return os.path.normpath(os.path.join(resolver.working_dir(), path))


__all__ = ["exists", "expand_path"]
