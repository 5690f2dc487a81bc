"""Settings read from the environment.

Hides which environment variables configure the application and what
"credential missing" means for the rest of the program.
"""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..llm import AssistantService, create_llm_provider
from ..llm.providers.gemini import DEFAULT_MODEL
from ..prompts import get_tax_assistant_instruction

DEFAULT_THEME_FILE = Path.home() / ".taxassist" / "theme.json"


class Settings(BaseModel):
    """Runtime configuration."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(default=None, repr=False)
    model: str = DEFAULT_MODEL
    theme_file: Path = DEFAULT_THEME_FILE

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)


def load_settings() -> Settings:
    """Build settings from environment variables.

    Environment variables:
        GEMINI_API_KEY: Gemini API key (falls back to API_KEY)
        GEMINI_MODEL: Model name (default: gemini-2.5-flash)
        TAXASSIST_THEME_FILE: Where the theme preference is stored
    """
    theme_file = os.getenv("TAXASSIST_THEME_FILE")
    return Settings(
        api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or None,
        model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        theme_file=Path(theme_file).expanduser() if theme_file else DEFAULT_THEME_FILE,
    )


def create_service(settings: Settings) -> AssistantService:
    """Create the assistant service for the given settings.

    Without a credential the service has no provider, which disables every
    AI feature before any request is attempted.
    """
    provider = None
    if settings.has_credential:
        provider = create_llm_provider("gemini", api_key=settings.api_key, model=settings.model)
    return AssistantService(provider, default_instruction=get_tax_assistant_instruction())
