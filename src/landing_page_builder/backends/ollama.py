from __future__ import annotations

import logging
from typing import Any

import httpx

from ..errors import GenerationNetworkError, GenerationParseError, GenerationTimeout

logger = logging.getLogger(__name__)


class OllamaBackend:
    """Local text generation through an Ollama server's ``/api/generate``."""

    name = "ollama"

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:11434",
        model: str = "wizardlm2",
        temperature: float = 0.7,
        top_p: float = 0.9,
        num_ctx: int = 4096,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.top_p = top_p
        self.num_ctx = num_ctx
        self._client = client

    def _payload(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": self.temperature,
                "top_p": self.top_p,
                "num_ctx": self.num_ctx,
            },
        }

    async def _post(self, client: httpx.AsyncClient, prompt: str) -> httpx.Response:
        return await client.post(
            f"{self.base_url}/api/generate",
            headers={"Content-Type": "application/json"},
            json=self._payload(prompt),
        )

    async def complete(self, prompt: str) -> str:
        """Send one non-streaming generation request and return ``response``.

        Timeouts are left to the caller, which cancels this coroutine.
        """
        try:
            if self._client is not None:
                resp = await self._post(self._client, prompt)
            else:
                async with httpx.AsyncClient(timeout=None) as client:
                    resp = await self._post(client, prompt)
        except httpx.TimeoutException as exc:
            raise GenerationTimeout(f"Ollama at {self.base_url} timed out") from exc
        except httpx.HTTPError as exc:
            raise GenerationNetworkError(f"Cannot reach Ollama at {self.base_url}: {exc}") from exc

        if resp.status_code >= 400:
            raise GenerationNetworkError(
                f"Ollama error ({resp.status_code}): {resp.text[:300]}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise GenerationParseError("Ollama returned a non-JSON envelope") from exc

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise GenerationParseError("Ollama response is missing the 'response' text")

        logger.debug(
            "Generated text with Ollama",
            extra={"model": self.model, "input_length": len(prompt), "output_length": len(text)},
        )
        return text

    async def _get_tags(self) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(f"{self.base_url}/api/tags", timeout=3.0)
        async with httpx.AsyncClient(timeout=3.0) as client:
            return await client.get(f"{self.base_url}/api/tags")

    async def check_availability(self) -> bool:
        try:
            resp = await self._get_tags()
        except httpx.HTTPError:
            logger.warning("Ollama is not reachable", extra={"base_url": self.base_url})
            return False
        return resp.is_success


__all__ = ["OllamaBackend"]
