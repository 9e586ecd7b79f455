import pytest

from landing_page_builder.models.request import GenerationRequest
from landing_page_builder.models.section import Section, SectionType
from landing_page_builder.models.website import Website, WebsiteMetadata


def make_website() -> Website:
    return Website(
        metadata=WebsiteMetadata(title="Acme"),
        sections=(
            Section(type="AdaptiveHero", section_type="Hero", order=1, props={"title": "Old", "subtitle": "Keep"}),
            Section(type="ContactForm", section_type="Contact", order=2, props={"email": "a@b.test"}),
        ),
    )


def test_replace_section_props_returns_new_value():
    website = make_website()

    updated = website.replace_section_props(1, {"title": "New"})

    assert updated.sections[0].props == {"title": "New", "subtitle": "Keep"}
    assert website.sections[0].props["title"] == "Old"
    assert updated.sections[1] == website.sections[1]


def test_replace_section_props_unknown_order():
    with pytest.raises(KeyError):
        make_website().replace_section_props(7, {"title": "New"})


def test_section_accepts_camel_case_payload():
    section = Section.model_validate({"type": "FAQAccordion", "sectionType": "FAQ", "order": 3})

    assert section.section_type == SectionType.faq.value
    assert section.source == "fallback"
    assert section.props == {}


def test_request_accepts_camel_case_and_comma_separated_points():
    request = GenerationRequest.model_validate(
        {
            "industry": "fitness",
            "websiteName": "Iron Gym",
            "targetAudience": "Busy professionals",
            "uniqueSellingPoints": "24/7 access, personal coaching,",
        }
    )

    assert request.website_name == "Iron Gym"
    assert request.style == "modern"
    assert list(request.unique_selling_points) == ["24/7 access", "personal coaching"]
    assert request.selling_points_phrase() == "24/7 access, personal coaching"


def test_request_without_selling_points():
    request = GenerationRequest(industry="legal", website_name="Lex", unique_selling_points=None)

    assert request.selling_points_phrase() == "quality service"
