from __future__ import annotations

"""Chat-completion client with structured (JSON schema) output."""

import os
from typing import Any

from .base import ChatProvider
from .errors import (
    ApiError,
    ConfigError,
    LLMError,
    ParseError,
    ProtocolError,
    RefusalError,
    TransportError,
    ValidationError,
)
from .openai_client import OpenAIClient
from .schema import to_response_format, validate_schema
from .types import ChatResult, Message, PromptOptions, RequestOptions, StructuredOutputSpec, UsageInfo

__version__ = "0.1.0"

__all__ = [
    "openai",
    "get_llm_client",
    "ChatProvider",
    "OpenAIClient",
    "ChatResult",
    "Message",
    "PromptOptions",
    "RequestOptions",
    "StructuredOutputSpec",
    "UsageInfo",
    "to_response_format",
    "validate_schema",
    "LLMError",
    "ValidationError",
    "ConfigError",
    "TransportError",
    "ApiError",
    "ProtocolError",
    "RefusalError",
    "ParseError",
]


def openai(**kwargs: Any) -> OpenAIClient:
    """Shorthand for ``OpenAIClient(**kwargs)``."""
    return OpenAIClient(**kwargs)


def get_llm_client(provider: str | None = None, **kwargs: Any) -> ChatProvider:
    """Return an instantiated client for the given provider."""

    provider = (provider or os.getenv("LLM_PROVIDER", "openai")).lower()

    if provider == "openai":
        return OpenAIClient(**kwargs)

    raise ValidationError(f"Unknown LLM provider: {provider}")
