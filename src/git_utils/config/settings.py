"""Config loading with layered overrides.

Priority chain: bundled defaults < ~/.config/git-utils/config.yaml < .git-utils/config.yaml
"""

import importlib.resources
from pathlib import Path
from typing import Any, Optional

import yaml

from git_utils.config.utils import deep_merge, load_yaml
from git_utils.git.errors import ConfigError

_config: Optional[dict] = None
_loaded_sources: list[str] = []

GLOBAL_CONFIG = Path.home() / ".config" / "git-utils" / "config.yaml"
PROJECT_CONFIG = Path(".git-utils") / "config.yaml"

# section -> key -> expected type
SCHEMA = {
    "git": {"binary": str},
    "log": {"name": str},
}


def _load_defaults() -> dict:
    """Load the config.yaml shipped inside the package."""
    resource = importlib.resources.files("git_utils") / "defaults" / "config.yaml"
    try:
        return yaml.safe_load(resource.read_text()) or {}
    except FileNotFoundError:
        raise ConfigError("Bundled defaults/config.yaml is missing") from None


def validate_config(config: dict) -> dict:
    """Check known keys hold non-empty values of the right type."""
    for section, keys in SCHEMA.items():
        values = config.get(section)
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")
        for key, expected in keys.items():
            if key in values and (not isinstance(values[key], expected) or not values[key]):
                raise ConfigError(
                    f"Config value {section}.{key} must be a non-empty {expected.__name__}",
                    context={"section": section, "key": key},
                )
    return config


def load_config() -> dict:
    """Load config with layered overrides: defaults < global < project."""
    global _loaded_sources
    _loaded_sources = ["defaults"]

    result = _load_defaults()
    for path in (GLOBAL_CONFIG, PROJECT_CONFIG):
        overrides = load_yaml(path)
        if overrides:
            result = deep_merge(result, overrides)
            _loaded_sources.append(str(path))

    return validate_config(result)


def get_config() -> dict:
    """Get cached config (loads on first access)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> dict:
    """Force reload config."""
    global _config
    _config = load_config()
    return _config


def get_config_loaded_sources() -> list[str]:
    """Return list of config sources that were loaded (for logging)."""
    return _loaded_sources


def get_setting(section: str, key: str, default: Any = None) -> Any:
    """Look up ``section.key`` in the merged config."""
    values = get_config().get(section) or {}
    return values.get(key, default)
