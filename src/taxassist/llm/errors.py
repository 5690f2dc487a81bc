"""Error taxonomy for the assistant.

Every failure is terminal at the turn boundary: nothing here is retried
automatically, the user resubmits.
"""

MISSING_KEY_MESSAGE = (
    "Gemini API key is not configured. "
    "Please set the GEMINI_API_KEY environment variable."
)
INVALID_KEY_MESSAGE = (
    "The provided API key is not valid. "
    "Please check your GEMINI_API_KEY environment variable."
)


class TaxAssistError(Exception):
    """Base class for assistant errors."""


class ConfigurationError(TaxAssistError):
    """Required credential is missing; AI features stay disabled."""

    def __init__(self, message: str = MISSING_KEY_MESSAGE):
        super().__init__(message)


class AuthError(TaxAssistError):
    """Upstream service rejected the credential."""

    def __init__(self, message: str = INVALID_KEY_MESSAGE):
        super().__init__(message)


class RequestError(TaxAssistError):
    """Transport or parse failure during a request or stream."""
