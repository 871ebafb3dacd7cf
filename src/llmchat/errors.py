from __future__ import annotations

"""Exception taxonomy for the chat client.

Every failure surfaces to the caller unchanged; nothing here is retried.
"""


class LLMError(Exception):
    """Base class for all client errors."""


class ValidationError(LLMError, ValueError):
    """Malformed caller input (messages, options or schema)."""


class ConfigError(LLMError, RuntimeError):
    """Client is missing required configuration, e.g. the API key."""


class TransportError(LLMError):
    """Network failure below the HTTP layer (connection refused, timeout)."""


class ApiError(LLMError):
    """The remote API answered with an HTTP error status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"API request failed (HTTP {status_code}): {message}")
        self.status_code = status_code
        self.message = message


class ProtocolError(LLMError):
    """Success status but the body is not a chat-completion envelope."""


class RefusalError(LLMError):
    def __init__(self, reason: str):
        super().__init__(f"Model refused request: {reason}")
        self.reason = reason


class ParseError(LLMError):
    """Structured output was requested but the reply is not valid JSON."""

    def __init__(self, content: str):
        super().__init__(f"Failed to parse structured response: {content}")
        self.content = content
