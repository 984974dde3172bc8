from copy import deepcopy
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONFIG_PATH = Path("resource_hub.config.yaml")

DEFAULT_CONFIG: Dict[str, Any] = {
    "storage": {
        "sqlite_path": "resource_hub.db",
    },
    "query": {
        "default_limit": 100,
    },
    "logging": {
        "level": "INFO",
    },
}


def _merge_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill missing sections/keys from DEFAULT_CONFIG (one level deep)."""
    merged = deepcopy(DEFAULT_CONFIG)
    for section, values in config.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load service configuration from YAML file.

    Args:
        path: Optional path to the config file. Defaults to resource_hub.config.yaml;
            when the default file is absent, built-in defaults are used.

    Returns:
        Configuration dictionary with defaults filled in

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If the config structure is invalid
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
        return deepcopy(DEFAULT_CONFIG)

    with cfg_path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError("Config must be a dictionary")
    for section in DEFAULT_CONFIG:
        if section in config and not isinstance(config[section], (dict, type(None))):
            raise ValueError(f"Config section '{section}' must be a dictionary")

    merged = _merge_defaults({k: v for k, v in config.items() if v is not None})

    default_limit = merged["query"].get("default_limit")
    if not isinstance(default_limit, int) or isinstance(default_limit, bool) or default_limit <= 0:
        raise ValueError(f"query.default_limit must be a positive integer, got {default_limit!r}")

    return merged


def get_sqlite_path(config: Dict[str, Any]) -> str:
    return config.get("storage", {}).get("sqlite_path", DEFAULT_CONFIG["storage"]["sqlite_path"])


def get_default_limit(config: Dict[str, Any]) -> int:
    return config.get("query", {}).get("default_limit", DEFAULT_CONFIG["query"]["default_limit"])


def get_log_level(config: Dict[str, Any]) -> str:
    return config.get("logging", {}).get("level", DEFAULT_CONFIG["logging"]["level"])
