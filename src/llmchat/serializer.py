from __future__ import annotations

"""Request serializer: logical request -> JSON wire body."""

import json
from typing import Any, Dict, Iterable

from .types import Message, RequestConfig


def build_payload(config: RequestConfig, messages: Iterable[Message]) -> Dict[str, Any]:
    """Return the request body as an ordered dict.

    Key order is fixed (model, messages, temperature, response_format) so the
    encoded body is deterministic.
    """
    payload: Dict[str, Any] = {
        "model": config.model,
        "messages": [{"role": m.role, "content": m.content} for m in messages],
        "temperature": float(config.temperature),
    }
    if config.response_format is not None:
        payload["response_format"] = config.response_format.to_wire()
    return payload


def serialize(config: RequestConfig, messages: Iterable[Message]) -> bytes:
    body = json.dumps(build_payload(config, messages), ensure_ascii=False, allow_nan=False)
    return body.encode("utf-8")
