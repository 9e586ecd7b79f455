from __future__ import annotations

from typing import Any, Literal, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"] = "user"
    content: str


class GenerationRequest(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "industry": "restaurant",
                "style": "vibrant",
                "websiteName": "Gourmet Haven",
                "description": "Fine dining with seasonal tasting menus",
                "targetAudience": "Couples and food lovers",
                "uniqueSellingPoints": ["Chef's table", "Local produce"],
            }
        },
    )

    industry: str
    style: str = "modern"
    website_name: str
    description: str = ""
    target_audience: str | None = None
    unique_selling_points: Sequence[str] = Field(default_factory=tuple)
    conversation: Sequence[ChatMessage] = Field(default_factory=tuple)
    section_overrides: Mapping[str, Mapping[str, Any]] = Field(
        default_factory=dict,
        description="Per section type prop overrides applied after mapping",
    )

    @field_validator("unique_selling_points", mode="before")
    @classmethod
    def _split_selling_points(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    def selling_points_phrase(self) -> str:
        return ", ".join(self.unique_selling_points) or "quality service"


__all__ = ["ChatMessage", "GenerationRequest"]
