from collections.abc import AsyncIterator
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Reference(BaseModel):
    """Grounding citation attached to a search-grounded answer."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Title of the cited web page")
    uri: str = Field(description="Address of the cited web page")


class HistoryTurn(BaseModel):
    """A prior conversation turn sent along with a streaming request."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"] = Field(description="Who authored the turn")
    text: str = Field(description="Text of the turn")


class GenerationResult(BaseModel):
    """Result of a one-shot request."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    references: list[Reference] | None = Field(
        default=None,
        description="Grounding sources, only present for search-grounded requests"
    )


class StreamChunk(BaseModel):
    """One piece of a streamed response."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(default="", description="Text fragment, possibly empty")
    references: list[Reference] | None = Field(
        default=None,
        description="Grounding sources as of this chunk (cumulative), if the chunk carried any"
    )


class StreamingResponse:
    """Wrapper for streaming responses that tracks grounding sources.

    Acts as an async iterator of chunks while remembering the latest
    non-empty reference list seen so far.

    Usage:
        stream = await provider.generate_stream(prompt, history)
        async for chunk in stream:
            print(chunk.text, end="")
        print(stream.references)
    """

    def __init__(self, async_iter: AsyncIterator[StreamChunk]):
        self._iter = async_iter
        self._references: list[Reference] | None = None

    @property
    def references(self) -> list[Reference] | None:
        """Latest non-empty reference list seen during iteration."""
        return self._references

    def __aiter__(self) -> "StreamingResponse":
        return self

    async def __anext__(self) -> StreamChunk:
        chunk = await self._iter.__anext__()
        if chunk.references:
            self._references = list(chunk.references)
        return chunk
