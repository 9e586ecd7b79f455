import json

import httpx
import pytest

from landing_page_builder.backends.ollama import OllamaBackend
from landing_page_builder.errors import (
    GenerationNetworkError,
    GenerationParseError,
    GenerationTimeout,
)


def make_backend(handler) -> OllamaBackend:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OllamaBackend(base_url="http://ollama.test/", model="wizardlm2", client=client)


@pytest.mark.asyncio
async def test_complete_posts_generation_request():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"response": '{"title": "Hi"}', "done": True})

    text = await make_backend(handler).complete("Write a hero")

    assert text == '{"title": "Hi"}'
    assert seen["url"] == "http://ollama.test/api/generate"
    assert seen["body"] == {
        "model": "wizardlm2",
        "prompt": "Write a hero",
        "stream": False,
        "options": {"temperature": 0.7, "top_p": 0.9, "num_ctx": 4096},
    }


@pytest.mark.asyncio
async def test_http_error_status_is_network_error():
    backend = make_backend(lambda request: httpx.Response(500, text="model crashed"))

    with pytest.raises(GenerationNetworkError) as excinfo:
        await backend.complete("prompt")

    assert excinfo.value.status_code == 500
    assert "model crashed" in str(excinfo.value)


@pytest.mark.asyncio
async def test_connection_failure_is_network_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GenerationNetworkError):
        await make_backend(handler).complete("prompt")


@pytest.mark.asyncio
async def test_transport_timeout_is_generation_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(GenerationTimeout):
        await make_backend(handler).complete("prompt")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"done": True}),
        httpx.Response(200, json={"response": 42}),
        httpx.Response(200, text="<html>proxy error</html>"),
    ],
)
async def test_malformed_envelope_is_parse_error(response):
    with pytest.raises(GenerationParseError):
        await make_backend(lambda request: response).complete("prompt")


@pytest.mark.asyncio
async def test_availability_check_uses_tags_endpoint():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/tags"
        return httpx.Response(200, json={"models": [{"name": "wizardlm2:latest"}]})

    backend = make_backend(handler)

    assert await backend.check_availability() is True


@pytest.mark.asyncio
async def test_unreachable_server_is_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    backend = make_backend(handler)

    assert await backend.check_availability() is False
