"""Theme preference and where it is kept.

The preference is an explicit ThemeMode value handed to the UI; loading and
saving go through a ThemeStore so the UI never touches the filesystem.
"""

import json
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Any


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "ThemeMode":
        return ThemeMode.LIGHT if self is ThemeMode.DARK else ThemeMode.DARK


DEFAULT_THEME_MODE = ThemeMode.DARK


class ThemeStore(ABC):
    """Persistence for the theme preference."""

    @abstractmethod
    def load(self) -> ThemeMode:
        """Stored preference, or the default when nothing usable is stored."""
        pass

    @abstractmethod
    def save(self, mode: ThemeMode) -> None:
        pass


class InMemoryThemeStore(ThemeStore):
    def __init__(self, mode: ThemeMode = DEFAULT_THEME_MODE):
        self._mode = mode

    def load(self) -> ThemeMode:
        return self._mode

    def save(self, mode: ThemeMode) -> None:
        self._mode = mode


class JsonFileThemeStore(ThemeStore):
    """Stores the preference as {"theme": "light"|"dark"} in a JSON file.

    A missing, unreadable or malformed file loads as the default mode.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> ThemeMode:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return DEFAULT_THEME_MODE

        if not isinstance(data, dict):
            return DEFAULT_THEME_MODE
        try:
            return ThemeMode(data.get("theme"))
        except ValueError:
            return DEFAULT_THEME_MODE

    def save(self, mode: ThemeMode) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"theme": mode.value}), encoding="utf-8")


def create_theme_store(store_type: str, **config: Any) -> ThemeStore:
    """Create a theme store.

    Args:
        store_type: 'memory' or 'json'
        **config: For 'json', path (required); for 'memory', mode (optional)

    Raises:
        ValueError: If store type is not supported
        TypeError: If required configuration is missing
    """
    store_lower = store_type.lower()

    if store_lower == "memory":
        return InMemoryThemeStore(**config)

    if store_lower == "json":
        if "path" not in config:
            raise TypeError("JSON theme store requires 'path' in config")
        return JsonFileThemeStore(config["path"])

    raise ValueError(
        f"Unsupported theme store: {store_type}. "
        f"Supported stores: 'memory', 'json'"
    )
