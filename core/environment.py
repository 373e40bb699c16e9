"""Resolvers for the user's home directory and the working directory."""
from __future__ import annotations

from dataclasses import dataclass
import os
import pwd


class UserLookupError(LookupError):
    """Raised when the current user or its home directory cannot be determined."""


class EnvironmentResolver:
    """Abstract source of identity and working-directory information."""

    def home_dir(self) -> str:
        """Return the current user's home directory."""
        raise NotImplementedError

    def working_dir(self) -> str:
        raise NotImplementedError


class SystemEnvironment(EnvironmentResolver):
    """Resolver backed by the user database and :func:`os.getcwd`.

    The home directory comes from the password database rather than
    ``$HOME`` so that it reflects the account the process runs as.
    """

    def home_dir(self) -> str:
        uid = os.getuid()
        try:
            entry = pwd.getpwuid(uid)
        except KeyError as exc:
            raise UserLookupError(f"user: unknown userid {uid}") from exc

        if not entry.pw_dir:
            raise UserLookupError(f"user: no home directory for {entry.pw_name}")
        return entry.pw_dir

    def working_dir(self) -> str:
        return os.getcwd()


@dataclass(slots=True)
class StaticEnvironment(EnvironmentResolver):
    """Resolver returning fixed values."""

    home: str | None
    cwd: str

    def home_dir(self) -> str:
        if self.home is None:
            raise UserLookupError("user: unknown current user")
        return self.home

    def working_dir(self) -> str:
        return self.cwd


__all__ = [
    "EnvironmentResolver",
    "StaticEnvironment",
    "SystemEnvironment",
    "UserLookupError",
]
