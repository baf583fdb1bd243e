"""Configuration management."""

import copy
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULTS: Dict[str, Any] = {
    "sprinkles": {
        "path": "app/sprinkles",
        "schema": "app/sprinkles.json",
        "namespace": "sprinkles.modules",
    },
    "environment": None,
    "logging": {
        "level": "INFO",
        "file": None,
    },
}

_config: Dict[str, Any] = {}
_base_path: Path = None


def load_config(config_path: str = None) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    global _config, _base_path

    if config_path is None:
        # Try to find config in common locations
        possible_paths = [
            Path("config/config.yaml"),
            Path("config.yaml"),
            Path.home() / ".config" / "sprinkles" / "config.yaml",
        ]
        for path in possible_paths:
            if path.exists():
                config_path = str(path)
                break
        else:
            raise FileNotFoundError(
                "No config.yaml found. Copy config/config.example.yaml to config/config.yaml "
                "and adjust the sprinkles paths."
            )

    config_path = Path(config_path).resolve()
    _base_path = config_path.parent.parent  # Project root

    with open(config_path) as f:
        loaded = yaml.safe_load(f) or {}

    _config = _with_defaults(loaded)

    # Resolve relative paths
    _resolve_paths()

    return _config


def _with_defaults(loaded: Dict[str, Any]) -> Dict[str, Any]:
    config = copy.deepcopy(DEFAULTS)
    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def _resolve_paths():
    """Resolve relative paths in config to absolute paths."""
    global _config

    for key in ["path", "schema"]:
        path = Path(_config["sprinkles"][key])
        if not path.is_absolute():
            _config["sprinkles"][key] = str(_base_path / path)

    if _config["logging"].get("file"):
        path = Path(_config["logging"]["file"])
        if not path.is_absolute():
            _config["logging"]["file"] = str(_base_path / path)


def get_config() -> Dict[str, Any]:
    """Get the loaded configuration."""
    if not _config:
        load_config()
    return _config


def get(key: str, default: Any = None) -> Any:
    """Get a config value by dot-notation key (e.g., 'sprinkles.path')."""
    if not _config:
        load_config()

    keys = key.split(".")
    value = _config
    for k in keys:
        if isinstance(value, dict) and k in value:
            value = value[k]
        else:
            return default
    return value
