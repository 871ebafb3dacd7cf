from __future__ import annotations

"""Conversation checks run before every outbound request."""

from typing import Any, Iterable, List, Mapping, Union

from .errors import ValidationError
from .types import Message

VALID_ROLES = ("system", "user", "assistant")

MessageLike = Union[Message, Mapping[str, Any]]


def validate_messages(messages: Iterable[MessageLike]) -> List[Message]:
    """Reject malformed conversations and return them as `Message` objects.

    Accepts `Message` instances or OpenAI-style dicts
    (``{"role": "user", "content": "..."}``).
    """
    if messages is None:
        raise ValidationError("Messages list cannot be empty")
    checked: List[Message] = []
    for index, msg in enumerate(messages):
        if isinstance(msg, Message):
            checked.append(msg)
            continue
        if not isinstance(msg, Mapping) or "role" not in msg or "content" not in msg:
            raise ValidationError(f"Message {index} must have 'role' and 'content' keys")
        role = msg["role"]
        if role not in VALID_ROLES:
            raise ValidationError(
                f"Message {index}: role must be one of: {', '.join(VALID_ROLES)} (got {role!r})"
            )
        content = msg["content"]
        if not isinstance(content, str):
            raise ValidationError(f"Message {index}: content must be a string")
        checked.append(Message(role=role, content=content))
    if not checked:
        raise ValidationError("Messages list cannot be empty")
    return checked
