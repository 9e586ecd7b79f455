from __future__ import annotations


class GenerationError(Exception):
    """Content for a section could not be produced by the language model."""

    def __init__(self, message: str, *, section_type: str | None = None) -> None:
        super().__init__(message)
        self.section_type = section_type


class GenerationTimeout(GenerationError):
    pass


class GenerationNetworkError(GenerationError):
    def __init__(
        self,
        message: str,
        *,
        section_type: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, section_type=section_type)
        self.status_code = status_code


class GenerationParseError(GenerationError):
    pass


__all__ = [
    "GenerationError",
    "GenerationTimeout",
    "GenerationNetworkError",
    "GenerationParseError",
]
