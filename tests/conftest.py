from __future__ import annotations

import asyncio
import re
from datetime import datetime, timezone

import pytest

from landing_page_builder.dictionaries import GenerationContext
from landing_page_builder.errors import GenerationNetworkError
from landing_page_builder.models.request import GenerationRequest

_SECTION_RE = re.compile(r"content for a (\w+) section")

FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


def section_of(prompt: str) -> str:
    match = _SECTION_RE.search(prompt)
    assert match, prompt
    return match.group(1)


class ScriptedBackend:
    """Answers per section type; unscripted sections fail like a dead endpoint."""

    name = "scripted"

    def __init__(self, responses=None, delays=None) -> None:
        self.responses = dict(responses or {})
        self.delays = dict(delays or {})
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        section_type = section_of(prompt)
        delay = self.delays.get(section_type)
        if delay:
            await asyncio.sleep(delay)
        response = self.responses.get(section_type)
        if response is None:
            raise GenerationNetworkError("connection refused")
        if isinstance(response, BaseException):
            raise response
        return response

    async def check_availability(self) -> bool:
        return bool(self.responses)


class HangingBackend:
    name = "hanging"

    def __init__(self) -> None:
        self.cancelled = False

    async def complete(self, prompt: str) -> str:
        try:
            await asyncio.sleep(3600)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return ""

    async def check_availability(self) -> bool:
        return False


@pytest.fixture
def fixed_context():
    return lambda: GenerationContext(now=FIXED_NOW)


@pytest.fixture
def restaurant_request() -> GenerationRequest:
    return GenerationRequest(
        industry="restaurant",
        style="vibrant",
        website_name="Gourmet Haven",
        description="fine dining",
    )
