"""Request shapes the dashboard features use to talk to the model.

Hides which system instruction is sent and how a provider stream is turned
into fragment/error callbacks. A service without a provider is the
"credential missing" state: it reports ConfigurationError before any call
is attempted.
"""

from collections.abc import Callable
from typing import Any

from .base import LLMProvider
from .errors import ConfigurationError, TaxAssistError
from .models import GenerationResult, HistoryTurn, Reference

FragmentCallback = Callable[[str, bool, list[Reference] | None], Any]
ErrorCallback = Callable[[str], Any]
DebugCallback = Callable[[str, str, str], None]


class AssistantService:
    """One-shot and streaming access to the upstream model.

    Instruction selection: a custom instruction always wins, otherwise the
    default instruction is sent when requested, otherwise none.
    """

    def __init__(self, provider: LLMProvider | None, default_instruction: str | None = None):
        self._provider = provider
        self._default_instruction = default_instruction
        self._debug_callback: DebugCallback | None = None

    @property
    def available(self) -> bool:
        """Whether a credential was configured."""
        return self._provider is not None

    @property
    def model(self) -> str | None:
        return self._provider.model if self._provider is not None else None

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the callback receiving (level, component, message) trace entries."""
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def _require_provider(self) -> LLMProvider:
        if self._provider is None:
            raise ConfigurationError()
        return self._provider

    def select_instruction(
        self,
        use_default_instruction: bool,
        custom_instruction: str | None = None
    ) -> str | None:
        if custom_instruction:
            return custom_instruction
        if use_default_instruction:
            return self._default_instruction
        return None

    async def request(
        self,
        prompt: str,
        use_default_instruction: bool = True,
        use_search_grounding: bool = False,
        custom_instruction: str | None = None
    ) -> GenerationResult:
        """Send a single prompt and wait for the full answer.

        Raises:
            ConfigurationError: No credential configured
            AuthError: The credential was rejected
            RequestError: Any other failure
        """
        provider = self._require_provider()
        instruction = self.select_instruction(use_default_instruction, custom_instruction)
        self._debug("info", "LLM", f"Request ({len(prompt)} chars, search={use_search_grounding})")
        try:
            result = await provider.generate(
                prompt,
                system_instruction=instruction,
                use_search_grounding=use_search_grounding,
            )
        except TaxAssistError as e:
            self._debug("error", "LLM", str(e))
            raise
        self._debug("info", "LLM", f"Response received ({len(result.text)} chars)")
        return result

    async def request_stream(
        self,
        prompt: str,
        prior_turns: list[HistoryTurn],
        on_fragment: FragmentCallback,
        on_error: ErrorCallback,
        use_default_instruction: bool = True,
        use_search_grounding: bool = False,
        custom_instruction: str | None = None
    ) -> None:
        """Stream an answer through callbacks.

        Calls on_fragment(text, False, references) for every chunk, in
        emission order, then exactly one on_fragment("", True, references).
        On failure on_error(message) is called instead of the terminal
        fragment. References are the latest non-empty list reported by the
        upstream service as of each chunk.
        """
        if self._provider is None:
            message = str(ConfigurationError())
            self._debug("error", "LLM", message)
            on_error(message)
            return

        instruction = self.select_instruction(use_default_instruction, custom_instruction)
        self._debug(
            "info", "LLM",
            f"Streaming request ({len(prior_turns)} prior turns, search={use_search_grounding})"
        )

        fragments = 0
        try:
            stream = await self._provider.generate_stream(
                prompt,
                history=prior_turns,
                system_instruction=instruction,
                use_search_grounding=use_search_grounding,
            )
            async for chunk in stream:
                fragments += 1
                on_fragment(chunk.text, False, stream.references)
        except TaxAssistError as e:
            self._debug("error", "LLM", f"Stream failed after {fragments} fragments: {e}")
            on_error(str(e))
            return

        self._debug("info", "LLM", f"Stream complete ({fragments} fragments)")
        on_fragment("", True, stream.references)

    async def close(self) -> None:
        """Release the provider's resources, if any."""
        if self._provider is not None:
            await self._provider.close()
