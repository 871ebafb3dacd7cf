from __future__ import annotations

"""Common interface for chat provider clients.

A concrete client implements `send_request`, which takes a conversation
(OpenAI-style: {"role": "user"|"assistant"|"system", "content": str}) and returns
a `ChatResult`. The single-turn helpers `prompt` and `prompt_structured` are
built on top of it, so a new backend only has to provide the request cycle.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ParseError, RefusalError, ValidationError
from .schema import to_response_format
from .types import ChatResult, PromptOptions, RequestOptions, StructuredOutputSpec
from .validation import MessageLike

OptionsT = TypeVar("OptionsT", bound=RequestOptions)
OptionsArg = Union[RequestOptions, Mapping[str, Any], None]


def merge_options(options: OptionsArg, overrides: Dict[str, Any], cls: Type[OptionsT]) -> OptionsT:
    """Combine an options object/dict with keyword overrides into `cls`."""
    data: Dict[str, Any] = {}
    if isinstance(options, BaseModel):
        # fields the target options class does not declare are dropped
        data.update(options.model_dump(exclude_none=True, include=set(cls.model_fields)))
    elif isinstance(options, Mapping):
        data.update(options)
    elif options is not None:
        raise ValidationError(f"Options must be a mapping or {cls.__name__}, got {type(options).__name__}")
    data.update(overrides)
    try:
        return cls(**data)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid options: {exc}") from exc


class ChatProvider(ABC):
    """Abstract base class for chat completion clients."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str = "",
        base_url: str = "",
        timeout: int = 30000,
    ):
        self._api_key = api_key or None
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = self._check_timeout(timeout)

    @abstractmethod
    def send_request(
        self,
        messages: Iterable[MessageLike],
        options: OptionsArg = None,
        *,
        response_format: Union[StructuredOutputSpec, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> ChatResult:
        """Send a conversation and return the interpreted reply."""
        ...

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_api_key(self, key: str | None) -> None:
        self._api_key = key or None

    def get_api_key(self) -> str:
        return self._api_key or ""

    def set_model(self, model: str) -> None:
        self._model = model

    def get_model(self) -> str:
        return self._model

    def set_timeout(self, timeout: int) -> None:
        self._timeout = self._check_timeout(timeout)

    def get_timeout(self) -> int:
        return self._timeout

    @staticmethod
    def _check_timeout(timeout: Any) -> int:
        if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
            raise ValidationError(f"Timeout must be a positive number of milliseconds, got {timeout!r}")
        return timeout

    # ------------------------------------------------------------------
    # Single-turn helpers
    # ------------------------------------------------------------------

    def response_format_for(self, schema: Mapping[str, Any]) -> StructuredOutputSpec:
        """Translate a ``{"name", "schema"}`` spec into this provider's envelope."""
        return to_response_format(schema)

    def prompt(self, text: str, options: OptionsArg = None, **overrides: Any) -> str:
        """Ask a single question (optionally with a system message) and return the text reply."""
        opts = merge_options(options, overrides, PromptOptions)
        result = self.send_request(self._conversation(text, opts.system), self._request_options(opts))
        if result.refusal is not None:
            raise RefusalError(result.refusal)
        return result.content

    def prompt_structured(
        self,
        text: str,
        schema: Mapping[str, Any],
        options: OptionsArg = None,
        **overrides: Any,
    ) -> Any:
        """Like `prompt`, but constrain the reply to `schema` and return the parsed JSON."""
        opts = merge_options(options, overrides, PromptOptions)
        response_format = self.response_format_for(schema)
        result = self.send_request(
            self._conversation(text, opts.system),
            self._request_options(opts),
            response_format=response_format,
        )
        if result.refusal is not None:
            raise RefusalError(result.refusal)
        if not result.has_parsed:
            raise ParseError(result.content)
        return result.parsed

    @staticmethod
    def _conversation(text: str, system: Optional[str]) -> List[Dict[str, str]]:
        messages: List[Dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": text})
        return messages

    @staticmethod
    def _request_options(opts: PromptOptions) -> RequestOptions:
        return RequestOptions(model=opts.model, temperature=opts.temperature)
