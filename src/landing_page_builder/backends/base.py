from __future__ import annotations

from typing import Protocol


class TextBackend(Protocol):
    """Anything that turns a prompt into free-form model text."""

    name: str

    async def complete(self, prompt: str) -> str:
        ...

    async def check_availability(self) -> bool:
        ...


__all__ = ["TextBackend"]
