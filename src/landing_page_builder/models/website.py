from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .section import Section


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ColorScheme(_CamelModel):
    primary: str = "#3b82f6"
    secondary: str = "#10b981"
    accent: str = "#8b5cf6"
    background: str = "#ffffff"
    text: str = "#1e293b"


class Typography(_CamelModel):
    heading_font: str = "Poppins"
    body_font: str = "Inter"
    base_font_size: str = "16px"
    scale_ratio: float = 1.25


class WebsiteSettings(_CamelModel):
    color_scheme: ColorScheme = Field(default_factory=ColorScheme)
    typography: Typography = Field(default_factory=Typography)


class WebsiteMetadata(_CamelModel):
    title: str
    description: str = ""
    industry: str | None = None
    style: str | None = None
    generated_at: datetime | None = None


class Website(_CamelModel):
    metadata: WebsiteMetadata
    sections: Sequence[Section] = Field(default_factory=tuple)
    settings: WebsiteSettings = Field(default_factory=WebsiteSettings)

    def replace_section_props(self, order: int, props: Mapping[str, Any]) -> "Website":
        """Return a copy with the section at ``order`` carrying merged props.

        The current value is left untouched; unknown orders raise KeyError.
        """
        replaced = False
        sections: list[Section] = []
        for section in self.sections:
            if section.order == order and not replaced:
                section = section.model_copy(update={"props": {**section.props, **props}})
                replaced = True
            sections.append(section)
        if not replaced:
            raise KeyError(f"No section with order {order}")
        return self.model_copy(update={"sections": tuple(sections)})


__all__ = ["ColorScheme", "Typography", "WebsiteSettings", "WebsiteMetadata", "Website"]
