from .base import LLMProvider
from .errors import AuthError, ConfigurationError, RequestError, TaxAssistError
from .factory import create_llm_provider
from .models import GenerationResult, HistoryTurn, Reference, StreamChunk, StreamingResponse
from .providers import GeminiProvider
from .service import AssistantService

__all__ = [
    "AssistantService",
    "AuthError",
    "ConfigurationError",
    "GeminiProvider",
    "GenerationResult",
    "HistoryTurn",
    "LLMProvider",
    "Reference",
    "RequestError",
    "StreamChunk",
    "StreamingResponse",
    "TaxAssistError",
    "create_llm_provider",
]
