from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping

from pydantic import ValidationError

from .content_client import ContentClient
from .dictionaries import (
    GenerationContext,
    default_generation_context,
    default_settings,
    menu_categories,
    resolve_plan,
)
from .errors import GenerationError
from .fallback import ContentPayload, FallbackContentGenerator
from .knowledge_base import normalize_industry
from .models.request import GenerationRequest
from .models.section import (
    AboutProps,
    AgentsProps,
    BlogProps,
    CaseStudiesProps,
    ContactProps,
    FAQProps,
    FeaturesProps,
    FooterProps,
    GalleryProps,
    GenericProps,
    HeaderProps,
    HeroProps,
    ListingsProps,
    MenuProps,
    NeighborhoodsProps,
    PricingProps,
    SearchProps,
    Section,
    SectionProps,
    SectionType,
    ServicesProps,
    TeamProps,
    TestimonialsProps,
)
from .models.website import Website, WebsiteMetadata, WebsiteSettings

logger = logging.getLogger(__name__)

ANCHOR_SECTIONS = frozenset({SectionType.hero.value, SectionType.footer.value})
DARK_PAIR = {"backgroundColor": "#000", "textColor": "#fff"}
LIGHT_PAIR = {"backgroundColor": "#fff", "textColor": "#000"}


class SectionState(str, Enum):
    pending = "PENDING"
    generating = "GENERATING"
    succeeded = "SUCCEEDED"
    failed_try_fallback = "FAILED_TRY_FALLBACK"
    mapped = "MAPPED"
    done = "DONE"


@dataclass(frozen=True)
class SectionContent:
    payload: ContentPayload
    source: str
    error: GenerationError | None = None


Shaper = Callable[[ContentPayload, GenerationRequest, GenerationContext], dict[str, Any]]


@dataclass(frozen=True)
class MappingRule:
    props_model: type[SectionProps]
    shape: Shaper

    @property
    def component(self) -> str:
        return self.props_model.component


def _pick(content: ContentPayload, *keys: str) -> dict[str, Any]:
    return {key: content[key] for key in keys if content.get(key) is not None}


def _titled(*list_keys: str) -> Shaper:
    def shape(content: ContentPayload, request: GenerationRequest, context: GenerationContext) -> dict[str, Any]:
        data = _pick(content, "title", "subtitle")
        for key in list_keys:
            data[key] = content.get(key) or []
        return data

    return shape


def _shape_header(content: ContentPayload, request: GenerationRequest, context: GenerationContext) -> dict[str, Any]:
    data = {"logo": content.get("logo") or request.website_name}
    data.update(_pick(content, "menu"))
    return data


def _hero_variant(request: GenerationRequest) -> str:
    if request.style.strip().lower() == "minimal":
        return "minimal"
    if normalize_industry(request.industry) == "restaurant":
        return "image-left"
    return "centered"


def _shape_hero(content: ContentPayload, request: GenerationRequest, context: GenerationContext) -> dict[str, Any]:
    data = {key: value for key, value in content.items() if value is not None}
    data["variant"] = _hero_variant(request)
    return data


def _shape_about(content: ContentPayload, request: GenerationRequest, context: GenerationContext) -> dict[str, Any]:
    return _pick(content, "title", "subtitle", "description", "image")


def _shape_menu(content: ContentPayload, request: GenerationRequest, context: GenerationContext) -> dict[str, Any]:
    data = _pick(content, "title")
    data["categories"] = content.get("categories") or menu_categories(request.industry)
    return data


def _shape_search(content: ContentPayload, request: GenerationRequest, context: GenerationContext) -> dict[str, Any]:
    return _pick(content, "placeholder")


def _shape_contact(content: ContentPayload, request: GenerationRequest, context: GenerationContext) -> dict[str, Any]:
    return _pick(content, "title", "subtitle", "address", "phone", "email")


def _shape_footer(content: ContentPayload, request: GenerationRequest, context: GenerationContext) -> dict[str, Any]:
    data = _pick(content, "links")
    data["copyright"] = f"© {context.now.year} {request.website_name}. All rights reserved."
    return data


def _shape_generic(content: ContentPayload, section_type: str) -> dict[str, Any]:
    title = content.get("title")
    description = content.get("description")
    return {
        "title": title if isinstance(title, str) and title else section_type,
        "description": description if isinstance(description, str) else "",
    }


MAPPING_RULES: Mapping[str, MappingRule] = {
    SectionType.header.value: MappingRule(HeaderProps, _shape_header),
    SectionType.hero.value: MappingRule(HeroProps, _shape_hero),
    SectionType.about.value: MappingRule(AboutProps, _shape_about),
    SectionType.menu.value: MappingRule(MenuProps, _shape_menu),
    SectionType.gallery.value: MappingRule(GalleryProps, _titled("images")),
    SectionType.testimonials.value: MappingRule(TestimonialsProps, _titled("items")),
    SectionType.services.value: MappingRule(ServicesProps, _titled("items")),
    SectionType.features.value: MappingRule(FeaturesProps, _titled("items")),
    SectionType.case_studies.value: MappingRule(CaseStudiesProps, _titled("cases")),
    SectionType.team.value: MappingRule(TeamProps, _titled("members")),
    SectionType.pricing.value: MappingRule(PricingProps, _titled("plans")),
    SectionType.search.value: MappingRule(SearchProps, _shape_search),
    SectionType.featured_listings.value: MappingRule(ListingsProps, _titled("listings")),
    SectionType.neighborhoods.value: MappingRule(NeighborhoodsProps, _titled("areas")),
    SectionType.agents.value: MappingRule(AgentsProps, _titled("agents")),
    SectionType.faq.value: MappingRule(FAQProps, _titled("items")),
    SectionType.blog.value: MappingRule(BlogProps, _titled("posts")),
    SectionType.contact.value: MappingRule(ContactProps, _shape_contact),
    SectionType.footer.value: MappingRule(FooterProps, _shape_footer),
}


def cosmetic_defaults(section_type: str) -> dict[str, str]:
    """Dark background for visual anchors (hero, footer), light elsewhere."""
    return dict(DARK_PAIR if section_type in ANCHOR_SECTIONS else LIGHT_PAIR)


def map_section(
    section_type: str,
    content: ContentPayload,
    request: GenerationRequest,
    *,
    order: int,
    source: str = "fallback",
    context: GenerationContext | None = None,
) -> Section:
    """Turn a content payload into a Section for ``section_type``.

    Missing keys fall back to literal defaults. Colors from the content win over
    the cosmetic defaults, and request overrides win over both. Raises
    pydantic.ValidationError when present values have the wrong types.
    """
    section_type = getattr(section_type, "value", section_type)
    context = context or default_generation_context()
    rule = MAPPING_RULES.get(section_type)

    if rule is None:
        props_model: type[SectionProps] = GenericProps
        data = _shape_generic(content, section_type)
    else:
        props_model = rule.props_model
        data = rule.shape(content, request, context)

    colors = cosmetic_defaults(section_type)
    for key in colors:
        value = content.get(key)
        if isinstance(value, str) and value:
            colors[key] = value
    data.update(colors)

    props = props_model.model_validate(data).to_props()
    props.update(request.section_overrides.get(section_type, {}))
    return Section(
        type=props_model.component,
        section_type=section_type,
        order=order,
        props=props,
        source=source,
    )


class SectionAssembler:
    """Builds the ordered section list for a generation request.

    Each planned section is generated, mapped and appended on its own, so a
    failure in one never affects its siblings.
    """

    def __init__(
        self,
        client: ContentClient | None,
        *,
        fallback: FallbackContentGenerator | None = None,
        concurrency: int = 1,
        context_factory: Callable[[], GenerationContext] = default_generation_context,
    ) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self._client = client
        self._fallback = fallback or FallbackContentGenerator()
        self._concurrency = concurrency
        self._context_factory = context_factory

    async def assemble(self, request: GenerationRequest) -> list[Section]:
        return await self._assemble(request, self._context_factory())

    async def build_website(
        self,
        request: GenerationRequest,
        settings: WebsiteSettings | None = None,
    ) -> Website:
        context = self._context_factory()
        sections = await self._assemble(request, context)
        metadata = WebsiteMetadata(
            title=request.website_name,
            description=request.description,
            industry=request.industry,
            style=request.style,
            generated_at=context.now,
        )
        return Website(
            metadata=metadata,
            sections=tuple(sections),
            settings=settings or default_settings(request.style, request.industry),
        )

    async def _assemble(self, request: GenerationRequest, context: GenerationContext) -> list[Section]:
        plan = resolve_plan(request.industry)
        logger.info(
            "Assembling website sections",
            extra={"industry": request.industry, "plan": plan, "concurrency": self._concurrency},
        )

        if self._concurrency == 1:
            sections = []
            for index, section_type in enumerate(plan):
                sections.append(await self._build_section(index + 1, section_type, request, context))
            return sections

        semaphore = asyncio.Semaphore(self._concurrency)

        async def bounded(index: int, section_type: str) -> Section:
            async with semaphore:
                return await self._build_section(index + 1, section_type, request, context)

        # gather returns results in argument order, i.e. plan order.
        return list(await asyncio.gather(*(bounded(i, t) for i, t in enumerate(plan))))

    async def obtain_content(self, section_type: str, request: GenerationRequest) -> SectionContent:
        if self._client is None:
            return SectionContent(payload=self._fallback.fallback(section_type, request), source="fallback")

        self._trace(section_type, SectionState.generating)
        try:
            payload = await self._client.generate(section_type, request)
        except GenerationError as exc:
            logger.warning(
                "Section generation failed, using fallback content",
                extra={
                    "section_type": section_type,
                    "error_class": type(exc).__name__,
                    "error": str(exc),
                },
            )
            self._trace(section_type, SectionState.failed_try_fallback)
            return SectionContent(
                payload=self._fallback.fallback(section_type, request),
                source="fallback",
                error=exc,
            )
        self._trace(section_type, SectionState.succeeded)
        return SectionContent(payload=payload, source="llm")

    async def _build_section(
        self,
        order: int,
        section_type: str,
        request: GenerationRequest,
        context: GenerationContext,
    ) -> Section:
        self._trace(section_type, SectionState.pending)
        content = await self.obtain_content(section_type, request)
        try:
            section = map_section(
                section_type,
                content.payload,
                request,
                order=order,
                source=content.source,
                context=context,
            )
        except ValidationError as exc:
            if content.source != "llm":
                raise
            logger.warning(
                "Model content did not fit section props, using fallback content",
                extra={"section_type": section_type, "error": str(exc)},
            )
            section = map_section(
                section_type,
                self._fallback.fallback(section_type, request),
                request,
                order=order,
                source="fallback",
                context=context,
            )
        self._trace(section_type, SectionState.mapped)
        self._trace(section_type, SectionState.done)
        return section

    def _trace(self, section_type: str, state: SectionState) -> None:
        logger.debug("Section state", extra={"section_type": section_type, "state": state.value})


__all__ = [
    "MAPPING_RULES",
    "MappingRule",
    "SectionAssembler",
    "SectionContent",
    "SectionState",
    "cosmetic_defaults",
    "map_section",
]
