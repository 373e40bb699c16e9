"""Utility primitives for command-line tools: text, sequences, processes and paths."""

from .command_runner import (
    CommandError,
    CommandFailedError,
    CommandNotFoundError,
    CommandResult,
    CommandRunner,
    CommandStartError,
    RecordingCommandRunner,
    SubprocessCommandRunner,
)
from .config_loader import Settings, load_config_file, load_settings, merge_mappings, normalize_string_list
from .console import Console
from .environment import EnvironmentResolver, StaticEnvironment, SystemEnvironment, UserLookupError
from .paths import exists, expand_path
from .process import execute, execute_silent
from .sequences import unique_ints
from .text import comma_split, sep_split, trim, trim_right

__all__ = [
    "CommandError",
    "CommandFailedError",
    "CommandNotFoundError",
    "CommandResult",
    "CommandRunner",
    "CommandStartError",
    "RecordingCommandRunner",
    "SubprocessCommandRunner",
    "Settings",
    "load_config_file",
    "load_settings",
    "merge_mappings",
    "normalize_string_list",
    "Console",
    "EnvironmentResolver",
    "StaticEnvironment",
    "SystemEnvironment",
    "UserLookupError",
    "exists",
    "expand_path",
    "execute",
    "execute_silent",
    "unique_ints",
    "comma_split",
    "sep_split",
    "trim",
    "trim_right",
]
