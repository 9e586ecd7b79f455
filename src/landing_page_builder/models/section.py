from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SectionType(str, Enum):
    header = "Header"
    hero = "Hero"
    about = "About"
    menu = "Menu"
    gallery = "Gallery"
    testimonials = "Testimonials"
    services = "Services"
    features = "Features"
    case_studies = "CaseStudies"
    team = "Team"
    pricing = "Pricing"
    search = "Search"
    featured_listings = "FeaturedListings"
    neighborhoods = "Neighborhoods"
    agents = "Agents"
    faq = "FAQ"
    blog = "Blog"
    contact = "Contact"
    footer = "Footer"


class SectionProps(BaseModel):
    """Props shared by every rendered section."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    background_color: str = "#fff"
    text_color: str = "#000"

    def to_props(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class TitledProps(SectionProps):
    title: str | None = None
    subtitle: str | None = None


class HeaderProps(SectionProps):
    component: ClassVar[str] = "SimpleHeader"
    logo: str
    menu: list[Any] = Field(default_factory=lambda: ["Home", "About", "Contact"])


class HeroProps(SectionProps):
    # LLM output for heroes is passed through, so unknown keys are kept.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    component: ClassVar[str] = "AdaptiveHero"
    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    variant: Literal["minimal", "image-left", "centered"] = "centered"


class AboutProps(TitledProps):
    component: ClassVar[str] = "AboutSection"
    description: str | None = None
    image: str = "/images/about-placeholder.jpg"


class MenuProps(SectionProps):
    component: ClassVar[str] = "InteractiveMenu"
    title: str = "Our Menu"
    categories: list[Any] = Field(default_factory=list)


class GalleryProps(TitledProps):
    component: ClassVar[str] = "ImageGallery"
    images: list[Any] = Field(default_factory=list)


class TestimonialsProps(TitledProps):
    component: ClassVar[str] = "TestimonialsSlider"
    items: list[Any] = Field(default_factory=list)


class ServicesProps(TitledProps):
    component: ClassVar[str] = "ServiceCards"
    items: list[Any] = Field(default_factory=list)


class FeaturesProps(TitledProps):
    component: ClassVar[str] = "FeatureGrid"
    items: list[Any] = Field(default_factory=list)


class CaseStudiesProps(TitledProps):
    component: ClassVar[str] = "CaseStudyShowcase"
    cases: list[Any] = Field(default_factory=list)


class TeamProps(TitledProps):
    component: ClassVar[str] = "TeamGrid"
    members: list[Any] = Field(default_factory=list)


class PricingProps(TitledProps):
    component: ClassVar[str] = "PricingTable"
    plans: list[Any] = Field(default_factory=list)


class SearchProps(SectionProps):
    component: ClassVar[str] = "SearchBar"
    placeholder: str = "Search properties..."


class ListingsProps(TitledProps):
    component: ClassVar[str] = "ListingCards"
    listings: list[Any] = Field(default_factory=list)


class NeighborhoodsProps(TitledProps):
    component: ClassVar[str] = "NeighborhoodOverview"
    areas: list[Any] = Field(default_factory=list)


class AgentsProps(TitledProps):
    component: ClassVar[str] = "AgentProfiles"
    agents: list[Any] = Field(default_factory=list)


class FAQProps(TitledProps):
    component: ClassVar[str] = "FAQAccordion"
    items: list[Any] = Field(default_factory=list)


class BlogProps(TitledProps):
    component: ClassVar[str] = "BlogPosts"
    posts: list[Any] = Field(default_factory=list)


class ContactProps(TitledProps):
    component: ClassVar[str] = "ContactForm"
    address: str | None = None
    phone: str | None = None
    email: str | None = None


class FooterProps(SectionProps):
    component: ClassVar[str] = "SimpleFooter"
    links: list[Any] = Field(default_factory=lambda: ["Privacy Policy", "Terms of Use", "Contact"])
    copyright: str


class GenericProps(SectionProps):
    component: ClassVar[str] = "GenericSection"
    title: str
    description: str = ""


class Section(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    type: str = Field(description="Component identifier consumed by the rendering layer")
    section_type: str
    order: int
    props: Mapping[str, Any] = Field(default_factory=dict)
    source: Literal["llm", "fallback"] = "fallback"


__all__ = [
    "SectionType",
    "SectionProps",
    "HeaderProps",
    "HeroProps",
    "AboutProps",
    "MenuProps",
    "GalleryProps",
    "TestimonialsProps",
    "ServicesProps",
    "FeaturesProps",
    "CaseStudiesProps",
    "TeamProps",
    "PricingProps",
    "SearchProps",
    "ListingsProps",
    "NeighborhoodsProps",
    "AgentsProps",
    "FAQProps",
    "BlogProps",
    "ContactProps",
    "FooterProps",
    "GenericProps",
    "Section",
]
