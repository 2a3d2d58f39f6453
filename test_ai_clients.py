"""
Tests for JSON reply parsing and retrying structured generation.
"""

from types import SimpleNamespace

import anthropic
import httpx
import instructor
import pytest
from instructor.exceptions import InstructorRetryException
from pydantic import BaseModel

import agents.ai.clients as clients
from agents.ai.clients import generate_structured_content, parse_json_response
from agents.exceptions import AIGenerationError, AIInvalidResponseError, AIRateLimitError

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


class Headline(BaseModel):
    headline: str


class FakeMessages:
    """Replays canned replies: strings become text blocks, models are returned as is."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, BaseModel):
            return reply
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=reply)])


class FakeClient:
    def __init__(self, replies):
        self.messages = FakeMessages(replies)


@pytest.fixture
def sleeps(monkeypatch):
    recorded = []
    monkeypatch.setattr(clients, "GENERATION_RETRY_BASE_DELAY", 1.0)
    monkeypatch.setattr(clients.time, "sleep", recorded.append)
    return recorded


def _use_client(monkeypatch, replies) -> FakeClient:
    client = FakeClient(replies)
    wrapped = []

    def fake_get_client(wrap_with_instructor=True):
        wrapped.append(wrap_with_instructor)
        return client

    monkeypatch.setattr(clients, "get_client", fake_get_client)
    client.wrapped = wrapped
    return client


def _status_error(cls, status):
    return cls(f"HTTP {status}", response=httpx.Response(status, request=_REQUEST), body=None)


def _retry_exhausted(cause="1 validation error for Headline"):
    return InstructorRetryException(cause, n_attempts=2, total_usage=0)


def test_get_client_wraps_anthropic_in_json_mode(monkeypatch):
    raw = object()
    wrapped = []
    monkeypatch.setattr(clients, "_clients", {})
    monkeypatch.setattr(clients, "Anthropic", lambda: raw)
    monkeypatch.setattr(
        clients.instructor, "from_anthropic",
        lambda client, mode: wrapped.append((client, mode)) or "instructor-client",
    )

    assert clients.get_client() == "instructor-client"
    assert clients.get_client() == "instructor-client"
    assert clients.get_client(wrap_with_instructor=False) is raw
    assert wrapped == [(raw, instructor.Mode.ANTHROPIC_JSON)]


def test_parse_fenced_code_block():
    assert parse_json_response('Sure!\n```json\n{"a": 1}\n```\nDone') == {"a": 1}
    assert parse_json_response('```\n[1, 2]\n```') == [1, 2]


def test_parse_embedded_object_and_array():
    assert parse_json_response('Here you go: {"a": {"b": 2}} hope it helps') == {"a": {"b": 2}}
    assert parse_json_response('Result: [1, 2, 3]') == [1, 2, 3]
    # a broken object does not hide a valid array
    assert parse_json_response('{oops} then [4, 5]') == [4, 5]


def test_parse_raw_text():
    assert parse_json_response('  42 ') == 42


def test_parse_failure():
    with pytest.raises(AIInvalidResponseError) as excinfo:
        parse_json_response("I cannot help with that")
    assert "I cannot help with that" in excinfo.value.message


def test_untyped_call_uses_raw_client_and_parses_text(monkeypatch, sleeps):
    client = _use_client(monkeypatch, ['{"headline": "Orbit"}'])

    result = generate_structured_content("system text", "user text")

    assert result == {"headline": "Orbit"}
    assert client.wrapped == [False]
    call = client.messages.calls[0]
    assert call["system"] == "system text"
    assert call["messages"] == [{"role": "user", "content": "user text"}]
    assert call["model"] == clients.BRAND_GENERATION_MODEL
    assert "response_model" not in call
    assert sleeps == []


def test_typed_call_goes_through_instructor(monkeypatch, sleeps):
    client = _use_client(monkeypatch, [Headline(headline="Orbit")])

    result = generate_structured_content("s", "u", Headline)

    assert result == Headline(headline="Orbit")
    assert client.wrapped == [True]
    call = client.messages.calls[0]
    assert call["response_model"] is Headline
    assert call["max_retries"] == clients.GENERATION_VALIDATION_ATTEMPTS
    assert call["system"] == "s"
    assert call["max_tokens"] == clients.GENERATION_MAX_TOKENS


def test_retries_with_exponential_backoff(monkeypatch, sleeps):
    client = _use_client(monkeypatch, [
        _retry_exhausted(),
        _status_error(anthropic.InternalServerError, 500),
        Headline(headline="Third time"),
    ])

    result = generate_structured_content("s", "u", Headline, max_retries=2)

    assert result.headline == "Third time"
    assert len(client.messages.calls) == 3
    assert sleeps == [1.0, 2.0]


def test_gives_up_after_max_retries(monkeypatch, sleeps):
    client = _use_client(monkeypatch, [_retry_exhausted() for _ in range(3)])

    with pytest.raises(AIInvalidResponseError) as excinfo:
        generate_structured_content("s", "u", Headline, max_retries=2)

    assert "Headline" in excinfo.value.message
    assert isinstance(excinfo.value.cause, InstructorRetryException)
    assert len(client.messages.calls) == 3
    assert sleeps == [1.0, 2.0]


def test_untyped_unparseable_reply_is_retried(monkeypatch, sleeps):
    client = _use_client(monkeypatch, ["not json", "[1, 2]"])

    assert generate_structured_content("s", "u", max_retries=1) == [1, 2]
    assert len(client.messages.calls) == 2
    assert sleeps == [1.0]


def test_rate_limit_maps_to_rate_limit_error(monkeypatch, sleeps):
    _use_client(monkeypatch, [_status_error(anthropic.RateLimitError, 429)])

    with pytest.raises(AIRateLimitError) as excinfo:
        generate_structured_content("s", "u", Headline, max_retries=0)

    assert isinstance(excinfo.value.cause, anthropic.RateLimitError)
    assert sleeps == []


def test_api_error_wrapped_by_instructor_keeps_its_mapping(monkeypatch, sleeps):
    rate_limited = _status_error(anthropic.RateLimitError, 429)
    _use_client(monkeypatch, [_retry_exhausted(rate_limited)])

    with pytest.raises(AIRateLimitError) as excinfo:
        generate_structured_content("s", "u", Headline, max_retries=0)

    assert excinfo.value.cause is rate_limited


def test_connection_error_maps_to_generation_error(monkeypatch, sleeps):
    _use_client(monkeypatch, [anthropic.APIConnectionError(request=_REQUEST)])

    with pytest.raises(AIGenerationError) as excinfo:
        generate_structured_content("s", "u", max_retries=0)

    assert not isinstance(excinfo.value, AIRateLimitError)
    assert excinfo.value.context["error_code"] is None


def test_reply_without_text_block(monkeypatch, sleeps):
    client = _use_client(monkeypatch, [])
    client.messages.create = lambda **kwargs: SimpleNamespace(content=[SimpleNamespace(type="tool_use")])

    with pytest.raises(AIInvalidResponseError):
        generate_structured_content("s", "u", max_retries=0)
