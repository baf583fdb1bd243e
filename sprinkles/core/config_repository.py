"""Configuration merged from the ``config://`` stream of every sprinkle."""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE_SUFFIXES = (".yaml", ".yml", ".json")


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_document(path: Path) -> Dict[str, Any]:
    """Load one YAML or JSON config file; an empty file is an empty dict."""
    content = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(content) if content.strip() else {}
    else:
        data = yaml.safe_load(content)
    return data or {}


class ConfigRepository:
    """Dot-notation access to merged sprinkle configuration."""

    def __init__(self, items: Dict[str, Any] = None):
        self._items: Dict[str, Any] = items or {}

    @classmethod
    def from_locator(cls, locator, environment: Optional[str] = None) -> "ConfigRepository":
        """
        Build the repository from the ``config://`` stream.

        Every ``default`` file is merged, from the first loaded sprinkle to the
        last, so later sprinkles override earlier ones. When ``environment`` is
        given, the matching ``<environment>`` files are merged on top.

        Args:
            locator: Resource locator with a ``config`` stream
            environment: Optional environment name, e.g. ``"production"``
        """
        repository = cls()
        if not locator.is_stream("config://"):
            logger.warning("No config:// stream registered, configuration is empty")
            return repository

        # Lowest priority first
        directories = list(reversed(locator.find_resources("config://")))
        for basename in ["default"] + ([environment] if environment else []):
            for path in cls._find_files(directories, basename):
                repository.merge(load_document(path))
                logger.debug(f"Merged config file: {path}")

        return repository

    @staticmethod
    def _find_files(directories: List[str], basename: str) -> List[Path]:
        files = []
        for directory in directories:
            for suffix in CONFIG_FILE_SUFFIXES:
                candidate = Path(directory) / f"{basename}{suffix}"
                if candidate.is_file():
                    files.append(candidate)
        return files

    def merge(self, items: Dict[str, Any]):
        self._items = deep_merge(self._items, items)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key (e.g., 'site.title')."""
        value = self._items
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any):
        keys = key.split(".")
        target = self._items
        for k in keys[:-1]:
            if not isinstance(target.get(k), dict):
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value

    def all(self) -> Dict[str, Any]:
        return copy.deepcopy(self._items)

    def __getitem__(self, key: str) -> Any:
        missing = object()
        value = self.get(key, missing)
        if value is missing:
            raise KeyError(key)
        return value

    def __contains__(self, key: str) -> bool:
        missing = object()
        return self.get(key, missing) is not missing
