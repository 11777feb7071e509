"""YAML helpers for layered config files."""

from pathlib import Path
from typing import Optional

import yaml

from git_utils.git.errors import ConfigError


def deep_merge(base: dict, override: dict) -> dict:
    """Merge ``override`` onto a copy of ``base``; nested dicts merge, anything else replaces."""
    merged = dict(base)
    for key, val in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(val, dict):
            merged[key] = deep_merge(current, val)
        else:
            merged[key] = val
    return merged


def load_yaml(path: Path) -> Optional[dict]:
    """Read a YAML mapping from ``path``.

    Missing files and documents that are not mappings yield None; a file
    that is not valid YAML raises ConfigError naming the file.
    """
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", context={"path": str(path)}) from e
    return data if isinstance(data, dict) else None
