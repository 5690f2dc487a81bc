from .settings import DEFAULT_THEME_FILE, Settings, create_service, load_settings
from .theme import (
    DEFAULT_THEME_MODE,
    InMemoryThemeStore,
    JsonFileThemeStore,
    ThemeMode,
    ThemeStore,
    create_theme_store,
)

__all__ = [
    "DEFAULT_THEME_FILE",
    "DEFAULT_THEME_MODE",
    "InMemoryThemeStore",
    "JsonFileThemeStore",
    "Settings",
    "ThemeMode",
    "ThemeStore",
    "create_service",
    "create_theme_store",
    "load_settings",
]
