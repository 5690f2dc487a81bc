"""Pytest configuration and shared fixtures."""
import os
from collections.abc import AsyncIterator, Callable
from typing import Any

import pytest

from taxassist.llm import (
    AssistantService,
    GenerationResult,
    HistoryTurn,
    LLMProvider,
    Reference,
    RequestError,
    StreamChunk,
    StreamingResponse,
)


class FakeProvider(LLMProvider):
    """In-memory provider that replays scripted chunks.

    Records every call so tests can check what was sent upstream.
    """

    def __init__(
        self,
        chunks: list[StreamChunk] | None = None,
        fail_after: int | None = None,
        error: Exception | None = None,
        answer: str = "Answer",
        on_chunk: Callable[[int], None] | None = None,
    ):
        self.chunks = chunks if chunks is not None else [StreamChunk(text="Hello"), StreamChunk(text=" world")]
        self.fail_after = fail_after
        self.error = error or RequestError("Gemini API stream request failed: connection reset")
        self.answer = answer
        self.on_chunk = on_chunk
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        use_search_grounding: bool = False,
        **kwargs: Any
    ) -> GenerationResult:
        self.calls.append({
            "prompt": prompt,
            "system_instruction": system_instruction,
            "use_search_grounding": use_search_grounding,
        })
        if self.fail_after == 0:
            raise self.error
        references = [Reference(title="IRS", uri="https://www.irs.gov")] if use_search_grounding else None
        return GenerationResult(text=self.answer, model=self.model, references=references)

    async def generate_stream(
        self,
        prompt: str,
        history: list[HistoryTurn] | None = None,
        system_instruction: str | None = None,
        use_search_grounding: bool = False,
        **kwargs: Any
    ) -> StreamingResponse:
        self.calls.append({
            "prompt": prompt,
            "history": list(history or []),
            "system_instruction": system_instruction,
            "use_search_grounding": use_search_grounding,
        })
        return StreamingResponse(self._chunks())

    async def _chunks(self) -> AsyncIterator[StreamChunk]:
        for index, chunk in enumerate(self.chunks):
            if self.fail_after is not None and index == self.fail_after:
                raise self.error
            yield chunk
            if self.on_chunk is not None:
                self.on_chunk(index)
        if self.fail_after is not None and self.fail_after >= len(self.chunks):
            raise self.error

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_provider():
    """Provider streaming two chunks: "Hello", " world"."""
    return FakeProvider()


@pytest.fixture
def service(fake_provider):
    """Service backed by the fake provider."""
    return AssistantService(fake_provider, default_instruction="You are a tax assistant.")


@pytest.fixture
def offline_service():
    """Service without a credential."""
    return AssistantService(None, default_instruction="You are a tax assistant.")


@pytest.fixture(scope="session")
def api_key():
    """Return the Gemini API key from environment."""
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables so tests start from defaults."""
    for name in ("GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL", "TAXASSIST_THEME_FILE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def provider_factory():
    """Build a FakeProvider with custom chunks or failure point."""
    return FakeProvider
