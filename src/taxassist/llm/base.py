from abc import ABC, abstractmethod
from typing import Any

from .models import GenerationResult, HistoryTurn, StreamingResponse


class LLMProvider(ABC):
    """Abstract base class for text-generation providers.

    This module hides the design decision of which upstream service is used.
    Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Mapping provider failures onto AuthError and RequestError

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            result = await provider.generate(prompt)
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Default model name."""

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        use_search_grounding: bool = False,
        **kwargs: Any
    ) -> GenerationResult:
        """Generate a single response.

        Args:
            prompt: User prompt
            system_instruction: Instruction for the model, None for none
            use_search_grounding: Let the model ground its answer in web search
            **kwargs: Provider-specific parameters

        Returns:
            GenerationResult with text and, when grounded, references

        Raises:
            AuthError: The credential was rejected
            RequestError: Any other failure
        """

    @abstractmethod
    async def generate_stream(
        self,
        prompt: str,
        history: list[HistoryTurn] | None = None,
        system_instruction: str | None = None,
        use_search_grounding: bool = False,
        **kwargs: Any
    ) -> StreamingResponse:
        """Generate a streaming response continuing a conversation.

        Args:
            prompt: New user message
            history: Prior turns, oldest first, not including the prompt
            system_instruction: Instruction for the model, None for none
            use_search_grounding: Let the model ground its answer in web search
            **kwargs: Provider-specific parameters

        Returns:
            StreamingResponse yielding StreamChunk objects in emission order.
            Iteration raises AuthError or RequestError on failure.
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
