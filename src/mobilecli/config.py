"""
Config discovery and merging for mobile-cli.

Settings come from a mobile-cli.toml file laid over DEFAULT_CONFIG. The file
is either passed explicitly with --config or discovered by walking up from
the directory mobile-cli is installed in.
"""

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import tomli

from mobilecli.default_config import DEFAULT_CONFIG

CONFIG_FILENAME = "mobile-cli.toml"
TOOL_DIR = Path(__file__).resolve().parent


@dataclass
class Config:
    root: Path
    path: Optional[Path] = None
    values: dict = field(default_factory=dict)

    def __getitem__(self, key):
        return self.values[key]

    def __contains__(self, key):
        return key in self.values

    def get(self, key, default=None):
        return self.values.get(key, default)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _overlay(defaults: dict, overrides: dict) -> dict:
    """Merge overrides onto a copy of defaults; tables merge one level deep."""
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------


def find_config_path(start_dir: Path) -> Optional[Path]:
    """Return the nearest mobile-cli.toml in start_dir or its parents, else None."""
    start_dir = Path(start_dir).resolve()
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def get_config(root: Path, config_path: Optional[Path], defaults: dict) -> Config:
    """Read config_path (if any) and lay its settings over defaults."""
    overrides = {}
    if config_path:
        config_path = Path(config_path)
        with open(config_path, "rb") as f:
            overrides = tomli.load(f)
    return Config(
        root=Path(root),
        path=config_path or None,
        values=_overlay(defaults, overrides),
    )


def resolve_config(
    explicit_path: Optional[str] = None, tool_dir: Path = TOOL_DIR
) -> Config:
    """
    Build the Config for one dispatch.

    An explicit path keeps the shell's cwd as root. Without one, discovery
    starts from tool_dir and tool_dir also becomes the root, since no project
    context is known yet.
    """
    if explicit_path:
        return get_config(Path.cwd(), Path(explicit_path), DEFAULT_CONFIG)

    return get_config(tool_dir, find_config_path(tool_dir), DEFAULT_CONFIG)
