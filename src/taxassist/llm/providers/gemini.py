"""Google Gemini provider implementation.

Uses the official Google GenAI SDK for async generation.
Reference: https://github.com/googleapis/python-genai

Search grounding attaches the Google Search tool; the cited pages come back
as grounding chunks on the first candidate and are turned into References.
"""

from collections.abc import AsyncIterator
from typing import Any

from google import genai
from google.genai import errors, types

from ..base import LLMProvider
from ..errors import AuthError, RequestError
from ..models import GenerationResult, HistoryTurn, Reference, StreamChunk, StreamingResponse

DEFAULT_MODEL = "gemini-2.5-flash"

_AUTH_STATUS_CODES = {401, 403}


def is_auth_failure(error: Exception) -> bool:
    """Check whether an SDK error means the API key was rejected."""
    if "API key not valid" in str(error):
        return True
    return isinstance(error, errors.ClientError) and error.code in _AUTH_STATUS_CODES


def extract_references(response: Any) -> list[Reference] | None:
    """Extract grounding sources from a response or stream chunk.

    Returns:
        None when the response carries no grounding chunks, otherwise the
        web sources that have both a title and an address (possibly empty)
    """
    if not response.candidates:
        return None
    metadata = response.candidates[0].grounding_metadata
    if not metadata or not metadata.grounding_chunks:
        return None

    references = []
    for chunk in metadata.grounding_chunks:
        web = chunk.web
        if web and web.uri and web.title:
            references.append(Reference(title=web.title, uri=web.uri))
    return references


class GeminiProvider(LLMProvider):
    """Google Gemini provider implementation.

    Hidden design decisions:
    - Google GenAI client initialization
    - History format conversion (assistant turns use the "model" role)
    - Google Search tool wiring and grounding extraction
    - Translating SDK exceptions into AuthError / RequestError
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Default model (gemini-2.5-flash, gemini-2.5-pro, ...)
            **client_kwargs: Additional kwargs for Client
        """
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        return self._model

    def _build_contents(self, prompt: str, history: list[HistoryTurn] | None) -> list[types.Content]:
        contents = [
            types.Content(role=turn.role, parts=[types.Part(text=turn.text)])
            for turn in history or []
        ]
        contents.append(types.Content(role="user", parts=[types.Part(text=prompt)]))
        return contents

    def _build_config(
        self,
        system_instruction: str | None,
        use_search_grounding: bool,
        **kwargs: Any
    ) -> types.GenerateContentConfig:
        tools = None
        if use_search_grounding:
            tools = [types.Tool(google_search=types.GoogleSearch())]
        return types.GenerateContentConfig(
            system_instruction=system_instruction,
            tools=tools,
            **kwargs
        )

    def _extract_text(self, response: Any) -> str:
        """Extract text content from a response, handling empty candidates."""
        if response.candidates:
            candidate = response.candidates[0]
            if candidate.content and candidate.content.parts:
                texts = [part.text for part in candidate.content.parts if part.text]
                if texts:
                    return "".join(texts)
        try:
            return response.text or ""
        except (ValueError, AttributeError):
            return ""

    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        use_search_grounding: bool = False,
        **kwargs: Any
    ) -> GenerationResult:
        """Generate a single response using Google Gemini."""
        config = self._build_config(system_instruction, use_search_grounding, **kwargs)
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=self._build_contents(prompt, None),
                config=config
            )
        except Exception as e:
            if is_auth_failure(e):
                raise AuthError() from e
            raise RequestError(f"Gemini API request failed: {e}") from e

        references = extract_references(response) if use_search_grounding else None
        return GenerationResult(
            text=self._extract_text(response),
            model=self._model,
            references=references
        )

    async def generate_stream(
        self,
        prompt: str,
        history: list[HistoryTurn] | None = None,
        system_instruction: str | None = None,
        use_search_grounding: bool = False,
        **kwargs: Any
    ) -> StreamingResponse:
        """Generate a streaming response using Google Gemini."""
        config = self._build_config(system_instruction, use_search_grounding, **kwargs)
        contents = self._build_contents(prompt, history)
        return StreamingResponse(self._stream_generator(contents, config, use_search_grounding))

    async def _stream_generator(
        self,
        contents: list[types.Content],
        config: types.GenerateContentConfig,
        use_search_grounding: bool,
    ) -> AsyncIterator[StreamChunk]:
        """Internal generator that yields text and grounding per chunk."""
        try:
            stream = await self._client.aio.models.generate_content_stream(
                model=self._model, contents=contents, config=config
            )
            async for chunk in stream:
                references = extract_references(chunk) if use_search_grounding else None
                text = self._extract_text(chunk)
                if text or references is not None:
                    yield StreamChunk(text=text, references=references)
        except Exception as e:
            if is_auth_failure(e):
                raise AuthError() from e
            raise RequestError(f"Gemini API stream request failed: {e}") from e

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
