from __future__ import annotations

"""Pydantic data model shared by the request and response pipeline."""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class StructuredOutputSpec(BaseModel):
    """Provider envelope for schema-constrained output."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    strict: bool = True
    # `schema` would shadow a BaseModel attribute
    schema_: Dict[str, Any] = Field(alias="schema")

    def to_wire(self) -> Dict[str, Any]:
        return {
            "type": "json_schema",
            "json_schema": {
                "name": self.name,
                "strict": self.strict,
                "schema": self.schema_,
            },
        }


class RequestConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    temperature: float = Field(allow_inf_nan=False)
    response_format: Optional[StructuredOutputSpec] = None


class RequestOptions(BaseModel):
    """Per-call overrides for `send_request`. Unset fields use client defaults."""

    model_config = ConfigDict(extra="forbid")

    model: Optional[str] = None
    temperature: Optional[float] = Field(default=None, allow_inf_nan=False)


class PromptOptions(RequestOptions):
    """Options for `prompt` / `prompt_structured`; adds an optional system message."""

    system: Optional[str] = None


class UsageInfo(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class ChatResult(BaseModel):
    """Interpreted reply of one chat-completion call."""

    model_config = ConfigDict(frozen=True)

    content: str
    model: str
    usage: UsageInfo = UsageInfo()
    refusal: Optional[str] = None
    parsed: Any = None

    @property
    def has_parsed(self) -> bool:
        return self.parsed is not None

    @property
    def refused(self) -> bool:
        return self.refusal is not None
