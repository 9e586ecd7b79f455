from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from .backends.base import TextBackend
from .errors import GenerationError, GenerationParseError, GenerationTimeout
from .knowledge_base import lookup
from .models.request import GenerationRequest

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
CONVERSATION_TURNS_IN_PROMPT = 6


def extract_json(text: str) -> dict[str, Any]:
    """Parse the object spanning the first ``{`` to the last ``}`` in ``text``.

    Raises GenerationParseError when there is no such span, it is not valid
    JSON, or it decodes to something other than an object.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise GenerationParseError("No JSON object found in model output")
    try:
        value = json.loads(text[start : end + 1])
    except (ValueError, RecursionError) as exc:
        raise GenerationParseError(f"Invalid JSON in model output: {exc}") from exc
    if not isinstance(value, dict):
        raise GenerationParseError("Model output JSON is not an object")
    return value


def build_prompt(section_type: str, request: GenerationRequest) -> str:
    context = lookup(request.industry)
    lines = [
        f"Generate professional content for a {section_type} section on a {request.industry} website.",
        f"Business Name: {request.website_name}",
        f"Description: {request.description}",
        f"Target Audience: {request.target_audience or 'general public'}",
        f"Unique Selling Points: {request.selling_points_phrase()}",
        f"Style: {request.style}",
    ]
    if request.conversation:
        lines.append("")
        lines.append("Conversation so far:")
        for message in list(request.conversation)[-CONVERSATION_TURNS_IN_PROMPT:]:
            lines.append(f"{message.role}: {message.content}")
    lines.append("")
    lines.append(
        "Structure your response as JSON with only these keys: "
        "title, subtitle, description, items (if applicable)."
    )
    prompt = "\n".join(lines)
    return f"{context}\n\n{prompt}" if context else prompt


class ContentClient:
    """Asks a text backend for one section's content payload.

    Each call is bounded by ``timeout``; when it elapses the in-flight backend
    call is cancelled and GenerationTimeout is raised. ``max_attempts`` defaults
    to a single attempt because callers supply their own fallback.
    """

    def __init__(
        self,
        backend: TextBackend,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_attempts: int = 1,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.backend = backend
        self.timeout = timeout
        self.max_attempts = max_attempts

    async def generate(self, section_type: str, request: GenerationRequest) -> dict[str, Any]:
        prompt = build_prompt(section_type, request)
        attempt = 0
        while True:
            attempt += 1
            try:
                return await self._attempt(section_type, prompt)
            except GenerationError as exc:
                exc.section_type = section_type
                logger.info(
                    "Section generation attempt failed",
                    extra={
                        "section_type": section_type,
                        "attempt": attempt,
                        "backend": self.backend.name,
                        "error_class": type(exc).__name__,
                        "error": str(exc),
                    },
                )
                if attempt >= self.max_attempts:
                    raise

    async def _attempt(self, section_type: str, prompt: str) -> dict[str, Any]:
        try:
            text = await asyncio.wait_for(self.backend.complete(prompt), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            raise GenerationTimeout(
                f"No response from {self.backend.name} within {self.timeout:g}s",
                section_type=section_type,
            ) from exc
        payload = extract_json(text)
        logger.debug(
            "Section content generated",
            extra={"section_type": section_type, "keys": sorted(payload)},
        )
        return payload

    async def check_availability(self) -> bool:
        return await self.backend.check_availability()


__all__ = ["ContentClient", "build_prompt", "extract_json", "DEFAULT_TIMEOUT_SECONDS"]
