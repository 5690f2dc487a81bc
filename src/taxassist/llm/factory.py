from typing import Any

from .base import LLMProvider
from .providers import GeminiProvider

SUPPORTED_PROVIDERS = ("gemini",)


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create a provider by name.

    Only Gemini is wired up. Its config takes api_key (required, non-empty)
    and model (default gemini-2.5-flash); other keys go to genai.Client.

    Raises:
        ValueError: Unknown provider name
        TypeError: api_key missing or empty
    """
    name = provider.lower()
    if name == "gemini":
        if not config.get("api_key"):
            raise TypeError("Gemini provider requires a non-empty 'api_key'")
        return GeminiProvider(**config)

    supported = ", ".join(repr(p) for p in SUPPORTED_PROVIDERS)
    raise ValueError(f"Unsupported provider: {provider}. Supported providers: {supported}")
