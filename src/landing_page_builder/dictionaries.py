from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Sequence

from .knowledge_base import normalize_industry
from .models.section import SectionType
from .models.website import ColorScheme, Typography, WebsiteSettings

DEFAULT_SECTION_PLAN: Sequence[str] = (
    SectionType.header,
    SectionType.hero,
    SectionType.about,
    SectionType.features,
    SectionType.contact,
    SectionType.footer,
)


INDUSTRY_SECTION_PLANS: Mapping[str, Sequence[str]] = {
    "restaurant": (
        SectionType.header,
        SectionType.hero,
        SectionType.about,
        SectionType.menu,
        SectionType.gallery,
        SectionType.testimonials,
        SectionType.contact,
        SectionType.footer,
    ),
    "technology": (
        SectionType.header,
        SectionType.hero,
        SectionType.features,
        SectionType.services,
        SectionType.case_studies,
        SectionType.team,
        SectionType.pricing,
        SectionType.contact,
        SectionType.footer,
    ),
    "realestate": (
        SectionType.header,
        SectionType.hero,
        SectionType.search,
        SectionType.featured_listings,
        SectionType.neighborhoods,
        SectionType.agents,
        SectionType.testimonials,
        SectionType.contact,
        SectionType.footer,
    ),
    "healthcare": (
        SectionType.header,
        SectionType.hero,
        SectionType.services,
        SectionType.team,
        SectionType.faq,
        SectionType.contact,
        SectionType.footer,
    ),
    "fitness": (
        SectionType.header,
        SectionType.hero,
        SectionType.features,
        SectionType.pricing,
        SectionType.team,
        SectionType.testimonials,
        SectionType.gallery,
        SectionType.contact,
        SectionType.footer,
    ),
    "legal": (
        SectionType.header,
        SectionType.hero,
        SectionType.about,
        SectionType.services,
        SectionType.team,
        SectionType.testimonials,
        SectionType.faq,
        SectionType.contact,
        SectionType.footer,
    ),
}


def resolve_plan(industry_key: str | None) -> list[str]:
    """Ordered section types for an industry, or the default plan."""
    plan = INDUSTRY_SECTION_PLANS.get(normalize_industry(industry_key), DEFAULT_SECTION_PLAN)
    return [getattr(section_type, "value", section_type) for section_type in plan]


COLOR_PALETTES: Mapping[str, ColorScheme] = {
    "modern": ColorScheme(
        primary="#3b82f6",
        secondary="#10b981",
        accent="#8b5cf6",
        background="#ffffff",
        text="#1e293b",
    ),
    "minimal": ColorScheme(
        primary="#000000",
        secondary="#404040",
        accent="#d4d4d4",
        background="#ffffff",
        text="#171717",
    ),
    "vibrant": ColorScheme(
        primary="#f43f5e",
        secondary="#8b5cf6",
        accent="#06b6d4",
        background="#ffffff",
        text="#18181b",
    ),
    "corporate": ColorScheme(
        primary="#1e40af",
        secondary="#1e3a8a",
        accent="#93c5fd",
        background="#ffffff",
        text="#1f2937",
    ),
    "creative": ColorScheme(
        primary="#8b5cf6",
        secondary="#ec4899",
        accent="#f59e0b",
        background="#ffffff",
        text="#18181b",
    ),
}


INDUSTRY_PALETTES: Mapping[str, str] = {
    "technology": "modern",
    "healthcare": "minimal",
    "education": "corporate",
    "finance": "corporate",
    "creative": "creative",
    "restaurant": "vibrant",
    "ecommerce": "modern",
    "realestate": "corporate",
    "legal": "minimal",
    "automotive": "modern",
    "fitness": "vibrant",
    "travel": "creative",
}


def default_settings(style: str | None, industry: str | None = None) -> WebsiteSettings:
    style_key = (style or "").strip().lower()
    if style_key in COLOR_PALETTES:
        palette = style_key
    else:
        palette = INDUSTRY_PALETTES.get(normalize_industry(industry), "modern")
    return WebsiteSettings(color_scheme=COLOR_PALETTES[palette], typography=Typography())


RESTAURANT_MENU_CATEGORIES: Sequence[Mapping[str, Any]] = (
    {
        "category": "Appetizers",
        "items": [{"name": "Bruschetta", "price": "$5.99"}, {"name": "Garlic Bread", "price": "$4.50"}],
    },
    {
        "category": "Main Courses",
        "items": [{"name": "Margherita Pizza", "price": "$10.99"}, {"name": "Lasagna", "price": "$12.50"}],
    },
    {
        "category": "Desserts",
        "items": [{"name": "Tiramisu", "price": "$6.00"}, {"name": "Panna Cotta", "price": "$5.50"}],
    },
)


def menu_categories(industry: str | None) -> list[dict[str, Any]]:
    if normalize_industry(industry) == "restaurant":
        return [
            {"category": entry["category"], "items": [dict(item) for item in entry["items"]]}
            for entry in RESTAURANT_MENU_CATEGORIES
        ]
    return []


@dataclass
class GenerationContext:
    now: datetime


def default_generation_context() -> GenerationContext:
    return GenerationContext(now=datetime.now(timezone.utc))


__all__ = [
    "DEFAULT_SECTION_PLAN",
    "INDUSTRY_SECTION_PLANS",
    "COLOR_PALETTES",
    "INDUSTRY_PALETTES",
    "RESTAURANT_MENU_CATEGORIES",
    "GenerationContext",
    "default_generation_context",
    "default_settings",
    "menu_categories",
    "resolve_plan",
]
