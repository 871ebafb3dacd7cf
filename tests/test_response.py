import json

import pytest

from llmchat.errors import ApiError, ProtocolError
from llmchat.response import interpret, parse_error

from conftest import completion


def test_plain_text():
    body = b'{"choices":[{"message":{"content":"hello","refusal":null}}],"model":"m","usage":{}}'
    result = interpret(200, body)
    assert result.content == "hello"
    assert result.refusal is None
    assert result.parsed is None
    assert not result.has_parsed
    assert result.model == "m"


def test_json_content_is_parsed():
    result = interpret(200, completion('{"a":1}'))
    assert result.parsed == {"a": 1}
    assert result.content == '{"a":1}'


def test_refusal_suppresses_parsing():
    result = interpret(200, completion('{"a":1}', refusal="I can't help with that."))
    assert result.refusal == "I can't help with that."
    assert result.parsed is None
    assert result.refused


@pytest.mark.parametrize("placeholder", ["", "null"])
def test_refusal_placeholders_mean_no_refusal(placeholder):
    # The literal string "null" is treated the same as a JSON null
    result = interpret(200, completion('{"a":1}', refusal=placeholder))
    assert result.refusal is None
    assert result.parsed == {"a": 1}


def test_missing_refusal_field():
    body = json.dumps({"choices": [{"message": {"content": "[1, 2]"}}], "model": "m", "usage": {}})
    assert interpret(200, body).parsed == [1, 2]


def test_null_content_with_refusal():
    result = interpret(200, completion(None, refusal="no"))
    assert result.content == ""
    assert result.refusal == "no"


def test_usage_and_model():
    result = interpret(
        200,
        completion("ok", model="gpt-4.1-nano-2025", usage={"prompt_tokens": 3, "completion_tokens": 1, "total_tokens": 4, "prompt_tokens_details": {"cached_tokens": 0}}),
    )
    assert result.model == "gpt-4.1-nano-2025"
    assert result.usage.total_tokens == 4
    assert result.usage.model_extra["prompt_tokens_details"] == {"cached_tokens": 0}


def test_api_error_message_extracted():
    with pytest.raises(ApiError) as info:
        interpret(401, b'{"error":{"message":"bad key","type":"invalid_request_error"}}')
    assert info.value.status_code == 401
    assert info.value.message == "bad key"
    assert "HTTP 401" in str(info.value)


def test_api_error_raw_body_fallback():
    with pytest.raises(ApiError) as info:
        interpret(502, b"<html>Bad Gateway</html>")
    assert info.value.status_code == 502
    assert info.value.message == "<html>Bad Gateway</html>"


def test_parse_error_without_message():
    assert parse_error('{"detail": "nope"}') == '{"detail": "nope"}'


@pytest.mark.parametrize(
    "body",
    [b"not json", b"{}", b'{"choices": []}', b'{"choices": [{}]}', b'{"choices": [{"message": "x"}]}', b"[]"],
)
def test_protocol_errors(body):
    with pytest.raises(ProtocolError):
        interpret(200, body)


@pytest.mark.parametrize("content", ["NaN", "Infinity", "-Infinity", '{"a": NaN}'])
def test_non_finite_constants_not_parsed(content):
    result = interpret(200, completion(content))
    assert result.content == content
    assert result.parsed is None
