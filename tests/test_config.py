"""Unit tests for settings and the theme store."""
import json

import pytest

from taxassist.config import (
    DEFAULT_THEME_FILE,
    DEFAULT_THEME_MODE,
    InMemoryThemeStore,
    JsonFileThemeStore,
    ThemeMode,
    create_service,
    create_theme_store,
    load_settings,
)
from taxassist.llm.providers.gemini import DEFAULT_MODEL


class TestSettings:
    """Tests for reading settings from the environment."""

    def test_defaults(self, clean_env):
        """Test that settings fall back to defaults with an empty environment."""
        settings = load_settings()

        assert settings.api_key is None
        assert not settings.has_credential
        assert settings.model == DEFAULT_MODEL
        assert settings.theme_file == DEFAULT_THEME_FILE

    def test_gemini_key_preferred(self, clean_env):
        """Test that GEMINI_API_KEY wins over the fallback variable."""
        clean_env.setenv("GEMINI_API_KEY", "gemini-key")
        clean_env.setenv("API_KEY", "other-key")

        assert load_settings().api_key == "gemini-key"

    def test_api_key_fallback(self, clean_env):
        """Test that the fallback key variable is used when needed."""
        clean_env.setenv("API_KEY", "other-key")

        assert load_settings().api_key == "other-key"

    def test_empty_key_is_missing(self, clean_env):
        """Test that an empty key counts as missing."""
        clean_env.setenv("GEMINI_API_KEY", "")

        assert not load_settings().has_credential

    def test_overrides(self, clean_env, tmp_path):
        """Test that environment variables override the defaults."""
        clean_env.setenv("GEMINI_MODEL", "gemini-2.5-pro")
        clean_env.setenv("TAXASSIST_THEME_FILE", str(tmp_path / "theme.json"))

        settings = load_settings()

        assert settings.model == "gemini-2.5-pro"
        assert settings.theme_file == tmp_path / "theme.json"

    def test_key_hidden_from_repr(self, clean_env):
        """Test that the key never appears in the settings repr."""
        clean_env.setenv("GEMINI_API_KEY", "secret-value")

        assert "secret-value" not in repr(load_settings())


class TestCreateService:
    """Tests for building the service from settings."""

    def test_without_credential(self, clean_env):
        """Test that the service is unavailable without a credential."""
        service = create_service(load_settings())

        assert not service.available
        assert service.select_instruction(True)

    def test_with_credential(self, clean_env):
        """Test that the service is available with a credential."""
        clean_env.setenv("GEMINI_API_KEY", "fake-key")
        clean_env.setenv("GEMINI_MODEL", "gemini-test")

        service = create_service(load_settings())

        assert service.available
        assert service.model == "gemini-test"


class TestThemeMode:
    def test_toggled(self):
        """Test that toggling switches between dark and light."""
        assert ThemeMode.DARK.toggled() is ThemeMode.LIGHT
        assert ThemeMode.LIGHT.toggled() is ThemeMode.DARK

    def test_default_is_dark(self):
        """Test that a new store starts in dark mode."""
        assert DEFAULT_THEME_MODE is ThemeMode.DARK


class TestThemeStores:
    """Tests for theme persistence."""

    def test_memory_store(self):
        """Test that the in-memory store keeps the saved mode."""
        store = InMemoryThemeStore()
        assert store.load() is ThemeMode.DARK

        store.save(ThemeMode.LIGHT)
        assert store.load() is ThemeMode.LIGHT

    def test_json_store_round_trip(self, tmp_path):
        """Test that the JSON store reads back the saved mode."""
        path = tmp_path / "nested" / "theme.json"
        store = JsonFileThemeStore(path)

        store.save(ThemeMode.LIGHT)

        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "light"}
        assert JsonFileThemeStore(path).load() is ThemeMode.LIGHT

    def test_json_store_missing_file(self, tmp_path):
        """Test that a missing JSON file loads the default."""
        assert JsonFileThemeStore(tmp_path / "absent.json").load() is DEFAULT_THEME_MODE

    @pytest.mark.parametrize("content", [
        "not json",
        "[1, 2]",
        '{"theme": "purple"}',
        '{"theme": null}',
        "{}",
    ])
    def test_json_store_unusable_content(self, tmp_path, content):
        """Test that unreadable JSON content loads the default."""
        path = tmp_path / "theme.json"
        path.write_text(content, encoding="utf-8")

        assert JsonFileThemeStore(path).load() is DEFAULT_THEME_MODE


class TestThemeStoreFactory:
    """Tests for create_theme_store."""

    def test_memory(self):
        """Test that the factory builds the in-memory store."""
        store = create_theme_store("memory", mode=ThemeMode.LIGHT)
        assert isinstance(store, InMemoryThemeStore)
        assert store.load() is ThemeMode.LIGHT

    def test_json(self, tmp_path):
        """Test that the factory builds the JSON store."""
        store = create_theme_store("JSON", path=tmp_path / "theme.json")
        assert isinstance(store, JsonFileThemeStore)

    def test_json_requires_path(self):
        """Test that the JSON store needs a path."""
        with pytest.raises(TypeError):
            create_theme_store("json")

    def test_unsupported(self):
        """Test that an unknown store name is rejected."""
        with pytest.raises(ValueError, match="Unsupported theme store"):
            create_theme_store("sqlite")
