import asyncio
import json

import pytest

from conftest import HangingBackend, ScriptedBackend
from landing_page_builder.content_client import ContentClient, build_prompt, extract_json
from landing_page_builder.errors import (
    GenerationNetworkError,
    GenerationParseError,
    GenerationTimeout,
)
from landing_page_builder.models.request import ChatMessage, GenerationRequest


def test_extract_json_ignores_surrounding_prose():
    text = 'Sure! Here is the JSON: {"title":"Welcome"} Hope that helps!'
    assert extract_json(text) == {"title": "Welcome"}


def test_extract_json_spans_nested_objects():
    text = 'Result:\n{"title": "Menu", "items": [{"name": "Soup"}]}\n'
    assert extract_json(text)["items"] == [{"name": "Soup"}]


@pytest.mark.parametrize(
    "text",
    [
        "no braces at all",
        "} backwards {",
        '{"title": "unterminated"',
        '{"a": 1} and then {"b": 2}',
        '["not", "an", "object"]',
        pytest.param('{"a": ' + "[" * 100000 + "]" * 100000 + "}", id="deeply-nested"),
    ],
)
def test_extract_json_rejects_unusable_output(text):
    with pytest.raises(GenerationParseError):
        extract_json(text)


def test_prompt_carries_business_details(restaurant_request):
    prompt = build_prompt("Menu", restaurant_request)
    assert prompt.startswith("Restaurant websites should include")
    assert "content for a Menu section on a restaurant website" in prompt
    assert "Business Name: Gourmet Haven" in prompt
    assert "Target Audience: general public" in prompt
    assert "Unique Selling Points: quality service" in prompt
    assert prompt.rstrip().endswith("items (if applicable).")


def test_prompt_without_knowledge_starts_with_instruction():
    request = GenerationRequest(industry="unknown-xyz", website_name="Mystery Co")
    assert build_prompt("Hero", request).startswith("Generate professional content for a Hero section")


def test_prompt_keeps_recent_conversation_only():
    conversation = [ChatMessage(role="user", content=f"turn {index}") for index in range(10)]
    request = GenerationRequest(industry="legal", website_name="Lex", conversation=conversation)
    prompt = build_prompt("About", request)
    assert "turn 3" not in prompt
    assert "user: turn 4" in prompt
    assert "user: turn 9" in prompt


@pytest.mark.asyncio
async def test_generate_returns_parsed_payload(restaurant_request):
    backend = ScriptedBackend({"Hero": 'Here you go: {"title": "Taste the Season"}'})
    client = ContentClient(backend)

    payload = await client.generate("Hero", restaurant_request)

    assert payload == {"title": "Taste the Season"}
    assert len(backend.prompts) == 1


@pytest.mark.asyncio
async def test_generate_times_out_and_cancels_backend(restaurant_request):
    backend = HangingBackend()
    client = ContentClient(backend, timeout=0.05)

    with pytest.raises(GenerationTimeout) as excinfo:
        await client.generate("Hero", restaurant_request)

    assert excinfo.value.section_type == "Hero"
    await asyncio.sleep(0)
    assert backend.cancelled


@pytest.mark.asyncio
async def test_generate_tags_errors_with_section_type(restaurant_request):
    client = ContentClient(ScriptedBackend())

    with pytest.raises(GenerationNetworkError) as excinfo:
        await client.generate("Footer", restaurant_request)

    assert excinfo.value.section_type == "Footer"


@pytest.mark.asyncio
async def test_generate_parse_failure(restaurant_request):
    client = ContentClient(ScriptedBackend({"About": "I cannot help with that."}))

    with pytest.raises(GenerationParseError):
        await client.generate("About", restaurant_request)


class FlakyBackend:
    name = "flaky"

    def __init__(self, failures: int) -> None:
        self.failures = failures
        self.calls = 0

    async def complete(self, prompt: str) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise GenerationNetworkError("temporarily unavailable", status_code=503)
        return json.dumps({"title": "Recovered"})

    async def check_availability(self) -> bool:
        return True


@pytest.mark.asyncio
async def test_generate_retries_up_to_max_attempts(restaurant_request):
    backend = FlakyBackend(failures=2)
    client = ContentClient(backend, max_attempts=3)

    assert await client.generate("Hero", restaurant_request) == {"title": "Recovered"}
    assert backend.calls == 3


@pytest.mark.asyncio
async def test_single_attempt_by_default(restaurant_request):
    backend = FlakyBackend(failures=1)
    client = ContentClient(backend)

    with pytest.raises(GenerationNetworkError):
        await client.generate("Hero", restaurant_request)
    assert backend.calls == 1


def test_client_rejects_bad_limits():
    with pytest.raises(ValueError):
        ContentClient(ScriptedBackend(), timeout=0)
    with pytest.raises(ValueError):
        ContentClient(ScriptedBackend(), max_attempts=0)


@pytest.mark.asyncio
async def test_check_availability_delegates_to_backend():
    assert await ContentClient(ScriptedBackend({"Hero": "{}"})).check_availability() is True
    assert await ContentClient(ScriptedBackend()).check_availability() is False
