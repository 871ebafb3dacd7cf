from __future__ import annotations

"""Response interpreter: HTTP status + body -> `ChatResult`."""

import json
import logging
from typing import Any, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from .errors import ApiError, ProtocolError
from .types import ChatResult, UsageInfo

logger = logging.getLogger(__name__)

# The provider sometimes sends a placeholder instead of omitting `refusal`
_NO_REFUSAL = ("", "null")


def _as_text(body: Union[bytes, str]) -> str:
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    return body


def parse_error(body: Union[bytes, str]) -> str:
    """Return `error.message` from an error envelope, else the raw body."""
    text = _as_text(body)
    try:
        data = json.loads(text)
    except ValueError:
        return text
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message") is not None:
            return str(error["message"])
    return text


def _refusal(message: dict) -> Optional[str]:
    refusal = message.get("refusal")
    if refusal is None:
        return None
    refusal = str(refusal)
    if refusal in _NO_REFUSAL:
        return None
    return refusal


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number {name} is not valid JSON")


def _try_parse(content: str) -> Any:
    try:
        return json.loads(content, parse_constant=_reject_constant)
    except ValueError:
        return None


def interpret(status_code: int, body: Union[bytes, str]) -> ChatResult:
    if status_code >= 400:
        message = parse_error(body)
        logger.error("Chat completion failed with HTTP %s: %s", status_code, message)
        raise ApiError(status_code, message)

    text = _as_text(body)
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ProtocolError(f"Response body is not valid JSON: {exc}") from exc

    try:
        message = data["choices"][0]["message"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ProtocolError("Response is missing choices[0].message") from exc
    if not isinstance(message, dict):
        raise ProtocolError("choices[0].message is not an object")

    content = message.get("content")
    content = "" if content is None else str(content)

    refusal = _refusal(message)
    parsed = None
    if refusal is None and content:
        parsed = _try_parse(content)

    usage = data.get("usage")
    try:
        usage_info = UsageInfo.model_validate(usage) if isinstance(usage, dict) else UsageInfo()
    except PydanticValidationError as exc:
        raise ProtocolError(f"Malformed usage block: {exc}") from exc
    result = ChatResult(
        content=content,
        model=str(data.get("model") or ""),
        usage=usage_info,
        refusal=refusal,
        parsed=parsed,
    )
    logger.debug(
        "Interpreted response model=%s refusal=%s structured=%s",
        result.model,
        result.refused,
        result.has_parsed,
    )
    return result
