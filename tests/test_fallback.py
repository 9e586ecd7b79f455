import pytest

from landing_page_builder.assembler import map_section
from landing_page_builder.fallback import FallbackContentGenerator
from landing_page_builder.models.request import GenerationRequest
from landing_page_builder.models.section import SectionType


@pytest.fixture
def generator() -> FallbackContentGenerator:
    return FallbackContentGenerator()


def test_every_section_type_has_fallback_content(generator, restaurant_request):
    for section_type in SectionType:
        payload = generator.fallback(section_type.value, restaurant_request)
        assert payload, section_type


def test_fallback_content_always_maps(generator, restaurant_request, fixed_context):
    for order, section_type in enumerate(SectionType, start=1):
        payload = generator.fallback(section_type.value, restaurant_request)
        section = map_section(
            section_type.value,
            payload,
            restaurant_request,
            order=order,
            context=fixed_context(),
        )
        assert section.section_type == section_type.value
        assert section.source == "fallback"


def test_unknown_section_type_yields_empty_payload(generator, restaurant_request):
    assert generator.fallback("Unicorn", restaurant_request) == {}


def test_fallback_is_deterministic(generator, restaurant_request):
    for section_type in SectionType:
        first = generator.fallback(section_type.value, restaurant_request)
        second = generator.fallback(section_type.value, restaurant_request)
        assert first == second


def test_hero_uses_website_name(generator, restaurant_request):
    payload = generator.fallback("Hero", restaurant_request)
    assert payload["title"] == "Welcome to Gourmet Haven"
    assert payload["primaryButton"]


def test_restaurant_menu_has_categories(generator, restaurant_request):
    payload = generator.fallback("Menu", restaurant_request)
    assert payload["categories"]


def test_menu_for_other_industries_is_never_empty(generator):
    request = GenerationRequest(industry="fitness", website_name="Iron Gym")
    payload = generator.fallback("Menu", request)
    assert payload["categories"][0]["items"][0]["name"] == "Iron Gym Classic"


def test_features_use_selling_points(generator):
    request = GenerationRequest(
        industry="technology",
        website_name="Acme Cloud",
        unique_selling_points="Fast setup, 24/7 support",
    )
    items = generator.fallback("Features", request)["items"]
    assert [item["title"] for item in items] == ["Fast setup", "24/7 support", "Customer Focus"]
