from __future__ import annotations

import logging
import os
from typing import Any, Iterable, Mapping, Union

from .base import ChatProvider, OptionsArg, merge_options
from .errors import ConfigError
from .response import interpret
from .schema import to_response_format
from .serializer import serialize
from .settings import ClientSettings
from .transport import HttpTransport
from .types import ChatResult, RequestConfig, RequestOptions, StructuredOutputSpec
from .validation import MessageLike, validate_messages

logger = logging.getLogger(__name__)


class OpenAIClient(ChatProvider):
    """Client for the OpenAI Chat Completions endpoint.

    Talks plain REST through a transport delegate (`HttpTransport`, built on
    `requests`, by default). Any endpoint speaking the same wire format can be
    used by passing a different `base_url`.

    The API key falls back to ``$OPENAI_API_KEY``, read once here; later changes
    to the environment are not picked up, use `set_api_key` instead.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout: int | None = None,
        base_url: str | None = None,
        transport: Any = None,
        settings: ClientSettings | None = None,
    ):
        settings = settings if settings is not None else ClientSettings()
        if api_key is None:
            api_key = os.getenv(settings.api_key_env)
        super().__init__(
            api_key=api_key,
            model=model or settings.model,
            base_url=base_url or settings.base_url,
            timeout=timeout if timeout is not None else settings.timeout_ms,
        )
        self.settings = settings
        self.transport = transport if transport is not None else HttpTransport()

    def send_request(
        self,
        messages: Iterable[MessageLike],
        options: OptionsArg = None,
        *,
        response_format: Union[StructuredOutputSpec, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> ChatResult:
        if not self._api_key:
            raise ConfigError(
                f"API key not set. Use set_api_key or set {self.settings.api_key_env} environment variable"
            )
        opts = merge_options(options, overrides, RequestOptions)
        checked = validate_messages(messages)
        if response_format is not None and not isinstance(response_format, StructuredOutputSpec):
            response_format = to_response_format(response_format)

        config = RequestConfig(
            model=opts.model or self._model,
            temperature=opts.temperature if opts.temperature is not None else self.settings.temperature,
            response_format=response_format,
        )
        body = serialize(config, checked)
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        url = f"{self._base_url}/chat/completions"
        logger.debug(
            "[chat] POST %s model=%s messages=%d structured=%s",
            url,
            config.model,
            len(checked),
            response_format is not None,
        )
        resp = self.transport.post(url, headers, body, self._timeout)
        return interpret(resp.status_code, resp.body)
