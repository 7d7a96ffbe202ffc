#!/usr/bin/env python3
"""
Dynamic settings management for the hold'em bot.

Components register their tunables with a default when they start and read
them back by dot-notation name, so a deployment can override any of them
from a JSON file without touching the code.

Usage:
    from holdem_bot.config.settings import Settings

    settings = Settings()
    settings.create("bot.scheduler.action_delay_ms", default=1500)
    delay = settings.get("bot.scheduler.action_delay_ms")

    # Tune and restore
    settings.update("bot.scheduler.action_delay_ms", 800)
    settings.reset_group("bot.scheduler")
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Iterator, List, Optional, Tuple
from box import Box

logger = logging.getLogger(__name__)

SETTINGS_VERSION = "1.0"


def _new_box(data: Optional[Dict[str, Any]] = None) -> Box:
    return Box(data or {})


def _walk(data: Box, path: str, create: bool = False) -> Tuple[Optional[Box], str]:
    """
    Find the container holding the last segment of a dot-notation path.

    Returns:
        (container, leaf key); container is None when a segment is missing
        and create is False
    """
    *groups, leaf = path.split('.')
    current = data
    for key in groups:
        if key not in current or not isinstance(current[key], dict):
            if not create:
                return None, leaf
            current[key] = _new_box()
        current = current[key]
    return current, leaf


def _lookup(data: Box, path: str) -> Any:
    """Value at a dot-notation path, or None if any segment is missing."""
    if not path:
        return data
    container, leaf = _walk(data, path)
    if container is None or leaf not in container:
        return None
    return container[leaf]


def _leaves(data: Dict[str, Any], prefix: str) -> Iterator[Tuple[str, Any]]:
    """Yield (dot path, value) for every non-group entry below data."""
    for key, value in data.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            yield from _leaves(value, path)
        else:
            yield path, value


class Settings:
    """
    Hierarchical settings store addressed by dot-notation names.

    Values live in python-box trees in memory. When the first instance is
    created with a settings file they are loaded from it and every change is
    written back.

    Thread-safe singleton implementation.
    """

    _instance = None
    _lock = Lock()

    def __new__(cls, settings_file: Optional[Path] = None):
        """Singleton pattern to ensure only one Settings instance exists."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(Settings, cls).__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self, settings_file: Optional[Path] = None):
        """
        Args:
            settings_file: JSON file to load from and save to; None keeps
                settings in memory only
        """
        if self._initialized:
            return
        self._initialized = True

        self.settings_file = Path(settings_file) if settings_file is not None else None
        self._values = _new_box()
        self._defaults = _new_box()

        if self.settings_file is None:
            logger.info("Settings initialized in memory")
        else:
            self._load()

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next Settings() starts fresh."""
        with cls._lock:
            cls._instance = None

    def create(self, setting_name: str, default: Any) -> None:
        """
        Register a setting and its default.

        A value already present (from the settings file or an earlier
        update) is kept.
        """
        container, leaf = _walk(self._defaults, setting_name, create=True)
        container[leaf] = default

        current = _lookup(self._values, setting_name)
        if current is not None:
            logger.debug(f"Setting '{setting_name}' keeps {current} (default {default})")
            return

        container, leaf = _walk(self._values, setting_name, create=True)
        container[leaf] = default
        self._save()
        logger.debug(f"Created setting '{setting_name}' = {default}")

    def update(self, setting_name: str, value: Any) -> None:
        """
        Change the value of a registered setting.

        Raises:
            KeyError: If the setting was never created
        """
        container, leaf = _walk(self._values, setting_name)
        if container is None or leaf not in container:
            raise KeyError(f"Setting '{setting_name}' does not exist. Use create() first.")

        previous = container[leaf]
        container[leaf] = value
        self._save()
        logger.debug(f"Updated setting '{setting_name}': {previous} -> {value}")

    def get(self, setting_name: str, fallback: Any = None) -> Any:
        """
        Read a setting.

        Returns:
            The current value, else fallback if given, else the registered
            default, else None
        """
        value = _lookup(self._values, setting_name)
        if value is not None:
            return value
        if fallback is not None:
            return fallback
        return _lookup(self._defaults, setting_name)

    def exists(self, setting_name: str) -> bool:
        return _lookup(self._values, setting_name) is not None

    def get_group(self, group_path: str) -> Dict[str, Any]:
        """All settings under a group, as a plain nested dict."""
        group = _lookup(self._values, group_path)
        if not isinstance(group, dict):
            logger.warning(f"Group '{group_path}' not found")
            return {}
        return group.to_dict() if isinstance(group, Box) else dict(group)

    def get_all(self) -> Dict[str, Any]:
        return self._values.to_dict()

    def list_settings(self, group_path: str = "") -> List[str]:
        """Names of the settings (not subgroups) directly under a group."""
        group = _lookup(self._values, group_path)
        if not isinstance(group, dict):
            return []
        return sorted(key for key, value in group.items() if not isinstance(value, dict))

    def reset(self, setting_name: str) -> None:
        """
        Restore a setting to its default.

        Raises:
            KeyError: If the setting has no registered default
        """
        default = _lookup(self._defaults, setting_name)
        if default is None:
            raise KeyError(f"Setting '{setting_name}' has no default value")

        container, leaf = _walk(self._values, setting_name, create=True)
        container[leaf] = default
        self._save()
        logger.info(f"Reset setting '{setting_name}' to default: {default}")

    def reset_group(self, group_path: str) -> None:
        """Restore every registered setting under a group to its default."""
        defaults = _lookup(self._defaults, group_path)
        if not isinstance(defaults, dict):
            logger.warning(f"No defaults found for group '{group_path}'")
            return

        for path, default in _leaves(defaults, group_path):
            container, leaf = _walk(self._values, path, create=True)
            container[leaf] = default
        self._save()
        logger.info(f"Reset group '{group_path}' to defaults")

    def _load(self) -> None:
        """Load values from the settings file, creating the file if absent."""
        if not self.settings_file.exists():
            logger.info(f"Settings file not found, creating new: {self.settings_file}")
            self._save()
            return

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse settings file {self.settings_file}: {e}")
            logger.warning("Using empty settings")
            return

        values = data.get("settings", data) if isinstance(data, dict) else {}
        self._values = _new_box(values)
        logger.info(f"Loaded settings from {self.settings_file}")

    def _save(self) -> None:
        """Write values to the settings file, if one is configured."""
        if self.settings_file is None:
            return

        payload = {
            "settings": self._values.to_dict(),
            "metadata": {
                "version": SETTINGS_VERSION,
                "last_modified": datetime.now().isoformat()
            }
        }
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(payload, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save settings to {self.settings_file}: {e}")
            raise
        logger.debug(f"Settings saved to {self.settings_file}")
