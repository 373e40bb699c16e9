"""Loading of optional settings files for the core helpers."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Sequence

import json
import tomllib

import yaml

from .command_runner import SubprocessCommandRunner
from .console import Console
from .environment import EnvironmentResolver
from .paths import exists, expand_path
from .text import comma_split, trim


ConfigLoader = Callable[[Any], Mapping[str, Any]]

DEFAULT_SETTINGS_PATH = "~/.config/core/settings.toml"


FILE_LOADERS: Dict[str, ConfigLoader] = {
    ".toml": lambda stream: tomllib.load(stream),
    ".json": lambda stream: json.load(stream),
    ".yaml": lambda stream: yaml.safe_load(stream),
    ".yml": lambda stream: yaml.safe_load(stream),
}
"""Mapping of file suffixes to loader callables."""


def register_loader(suffix: str, loader: ConfigLoader) -> None:
    """Register ``loader`` for files ending with ``suffix``."""

    normalized = suffix.lower()
    if not normalized.startswith("."):
        raise ValueError("Suffix must start with '.'")
    FILE_LOADERS[normalized] = loader


def load_config_file(path: Path) -> Mapping[str, Any]:
    """Load and decode a configuration mapping from ``path``."""

    suffix = path.suffix.lower()
    loader = FILE_LOADERS.get(suffix)
    if loader is None:
        supported = ", ".join(sorted(FILE_LOADERS)) or "<none>"
        raise ValueError(
            f"Unsupported configuration file extension: {suffix}. Supported: {supported}"
        )

    mode = "rb" if suffix == ".toml" else "r"
    kwargs: Dict[str, Any] = {}
    if mode == "r":
        kwargs["encoding"] = "utf-8"

    with path.open(mode, **kwargs) as handle:
        data = loader(handle)

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"Configuration file '{path}' must contain a mapping at the root")

    return data


def merge_mappings(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep merge two mapping objects."""

    result: Dict[str, Any] = dict(base)
    for key, value in overlay.items():
        existing = result.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            result[key] = merge_mappings(existing, value)
        else:
            result[key] = value
    return result


def normalize_string_list(value: Any, *, field_name: str | None = None) -> List[str]:
    """Coerce ``value`` into a list of trimmed strings.

    A single string is treated as a comma-separated list.
    """

    if value is None:
        return []

    if isinstance(value, str):
        return [text for text in map(trim, comma_split(value)) if text]

    if isinstance(value, Sequence):
        items: List[str] = []
        for item in value:
            if not isinstance(item, str):
                label = f"{field_name} " if field_name else ""
                raise TypeError(f"{label}entries must be strings")
            text = trim(item)
            if text:
                items.append(text)
        return items

    label = f"{field_name} " if field_name else ""
    raise TypeError(f"{label}must be a string or sequence of strings")


@dataclass(slots=True)
class Settings:
    console_level: str = "none"
    search_path: List[str] = field(default_factory=list)

    def console(self) -> Console:
        return Console(self.console_level)

    def runner(self) -> SubprocessCommandRunner:
        return SubprocessCommandRunner(search_path=self.search_path)


def settings_from_mapping(
    data: Mapping[str, Any], *, environment: EnvironmentResolver | None = None
) -> Settings:
    """Build :class:`Settings` from a decoded configuration mapping."""

    console_section = data.get("console", {})
    exec_section = data.get("exec", {})
    if not isinstance(console_section, Mapping) or not isinstance(exec_section, Mapping):
        raise TypeError("'console' and 'exec' must be tables")

    level = console_section.get("level", "none")
    if not isinstance(level, str) or trim(level).lower() not in Console.LEVELS:
        supported = ", ".join(Console.LEVELS)
        raise ValueError(f"console.level must be one of: {supported}")

    directories = normalize_string_list(exec_section.get("search_path"), field_name="exec.search_path")
    expanded = [expand_path(entry, environment=environment) for entry in directories]

    return Settings(console_level=trim(level).lower(), search_path=list(dict.fromkeys(expanded)))


def load_settings(
    path: str | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
    environment: EnvironmentResolver | None = None,
) -> Settings:
    """Load settings from ``path`` or the default location.

    A missing file yields default settings. ``overrides`` is deep-merged on
    top of the file contents.
    """

    resolved = expand_path(path or DEFAULT_SETTINGS_PATH, environment=environment)
    data: Mapping[str, Any] = {}
    if exists(resolved):
        data = load_config_file(Path(resolved))
    if overrides:
        data = merge_mappings(data, overrides)
    return settings_from_mapping(data, environment=environment)


__all__ = [
    "ConfigLoader",
    "DEFAULT_SETTINGS_PATH",
    "FILE_LOADERS",
    "Settings",
    "load_config_file",
    "load_settings",
    "merge_mappings",
    "normalize_string_list",
    "register_loader",
    "settings_from_mapping",
]
