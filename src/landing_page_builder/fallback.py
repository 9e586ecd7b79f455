from __future__ import annotations

import logging
from typing import Any, Callable

from .dictionaries import menu_categories
from .knowledge_base import normalize_industry
from .models.request import GenerationRequest
from .models.section import SectionType

logger = logging.getLogger(__name__)

ContentPayload = dict[str, Any]


class FallbackContentGenerator:
    """Static, industry-aware content used whenever the model cannot answer.

    Every builder is a pure function of the request, so two calls with the
    same input produce equal payloads.
    """

    def __init__(self) -> None:
        self._builders: dict[str, Callable[[GenerationRequest], ContentPayload]] = {
            SectionType.header.value: self._header,
            SectionType.hero.value: self._hero,
            SectionType.about.value: self._about,
            SectionType.menu.value: self._menu,
            SectionType.gallery.value: self._gallery,
            SectionType.testimonials.value: self._testimonials,
            SectionType.services.value: self._services,
            SectionType.features.value: self._features,
            SectionType.case_studies.value: self._case_studies,
            SectionType.team.value: self._team,
            SectionType.pricing.value: self._pricing,
            SectionType.search.value: self._search,
            SectionType.featured_listings.value: self._featured_listings,
            SectionType.neighborhoods.value: self._neighborhoods,
            SectionType.agents.value: self._agents,
            SectionType.faq.value: self._faq,
            SectionType.blog.value: self._blog,
            SectionType.contact.value: self._contact,
            SectionType.footer.value: self._footer,
        }

    def fallback(self, section_type: str, request: GenerationRequest) -> ContentPayload:
        builder = self._builders.get(getattr(section_type, "value", section_type))
        if builder is None:
            logger.debug("No fallback content for section type", extra={"section_type": section_type})
            return {}
        return builder(request)

    def _industry_label(self, request: GenerationRequest) -> str:
        return request.industry.strip().lower() or "business"

    def _header(self, request: GenerationRequest) -> ContentPayload:
        return {
            "logo": request.website_name,
            "menu": ["Home", "About", "Services", "Contact"],
        }

    def _hero(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": f"Welcome to {request.website_name}",
            "subtitle": "Professional services you can trust",
            "description": request.description,
            "primaryButton": "Get Started",
            "secondaryButton": "Learn More",
        }

    def _about(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "About Us",
            "subtitle": f"Get to know {request.website_name}",
            "description": request.description
            or "We are passionate about what we do and always strive for excellence.",
            "image": "/images/about-placeholder.jpg",
        }

    def _menu(self, request: GenerationRequest) -> ContentPayload:
        categories = menu_categories(request.industry)
        if not categories:
            categories = [
                {
                    "category": "Signature Offerings",
                    "items": [{"name": f"{request.website_name} Classic", "price": "$19.00"}],
                }
            ]
        return {"title": "Our Menu", "categories": categories}

    def _gallery(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "Our Work",
            "subtitle": f"Snapshots from {request.website_name}",
            "images": [
                "/images/gallery1.jpg",
                "/images/gallery2.jpg",
                "/images/gallery3.jpg",
            ],
        }

    def _testimonials(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "What Our Clients Say",
            "subtitle": "Trusted by hundreds",
            "items": [
                {
                    "name": "Jane Doe",
                    "role": "CEO, Example Inc.",
                    "quote": f"Outstanding service and support from {request.website_name}!",
                    "image": "/images/avatar1.jpg",
                },
                {
                    "name": "John Smith",
                    "role": "Founder, Startup Co.",
                    "quote": "Highly recommended for anyone looking to grow their business.",
                    "image": "/images/avatar2.jpg",
                },
            ],
        }

    def _services(self, request: GenerationRequest) -> ContentPayload:
        industry = self._industry_label(request)
        return {
            "title": "Our Services",
            "subtitle": "What We Offer",
            "items": [
                {"title": "Consulting", "description": f"Expert {industry} advice to help you succeed."},
                {"title": "Delivery", "description": "Custom solutions built for your needs."},
                {"title": "Support", "description": "We're here to help you every step of the way."},
            ],
        }

    def _features(self, request: GenerationRequest) -> ContentPayload:
        points = list(request.unique_selling_points[:3])
        defaults = [
            ("Quality Service", "Exceptional service quality"),
            ("Expert Team", "Experienced professionals"),
            ("Customer Focus", "Dedicated to your satisfaction"),
        ]
        items = []
        for index, (title, description) in enumerate(defaults):
            if index < len(points):
                items.append({"title": points[index], "description": f"{request.website_name}: {points[index]}"})
            else:
                items.append({"title": title, "description": description})
        return {"title": "Why Choose Us", "subtitle": "Our Key Advantages", "items": items}

    def _case_studies(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "Case Studies",
            "subtitle": f"Results delivered by {request.website_name}",
            "cases": [
                {"title": "Scaling a Growing Team", "summary": "Reduced onboarding time by 40%."},
                {"title": "Modernizing Operations", "summary": "Cut infrastructure costs by a third."},
            ],
        }

    def _team(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "Meet Our Team",
            "subtitle": "Experienced. Passionate. Dedicated.",
            "members": [
                {"name": "Alice Johnson", "role": "Founder & CEO", "image": "/images/team1.jpg"},
                {"name": "Mark Davis", "role": "CTO", "image": "/images/team2.jpg"},
            ],
        }

    def _pricing(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "Our Pricing Plans",
            "subtitle": "Transparent and affordable",
            "plans": [
                {"name": "Basic", "price": "$29/mo", "features": ["1 Project", "Email Support", "Basic Analytics"]},
                {"name": "Pro", "price": "$59/mo", "features": ["5 Projects", "Priority Support", "Advanced Analytics"]},
            ],
        }

    def _search(self, request: GenerationRequest) -> ContentPayload:
        if normalize_industry(request.industry) == "realestate":
            return {"placeholder": "Search properties..."}
        return {"placeholder": f"Search {request.website_name}..."}

    def _featured_listings(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "Featured Listings",
            "subtitle": f"Hand-picked by {request.website_name}",
            "listings": [
                {"title": "Modern Family Home", "price": "$450,000", "beds": 4, "baths": 3, "imageUrl": "/images/listing1.jpg"},
                {"title": "Downtown Loft", "price": "$320,000", "beds": 2, "baths": 2, "imageUrl": "/images/listing2.jpg"},
            ],
        }

    def _neighborhoods(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "Explore Neighborhoods",
            "subtitle": "Find the area that fits your lifestyle",
            "areas": [
                {"name": "Riverside", "description": "Quiet streets and parks along the water."},
                {"name": "Old Town", "description": "Historic charm close to shops and cafes."},
            ],
        }

    def _agents(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "Our Agents",
            "subtitle": f"The people behind {request.website_name}",
            "agents": [
                {"name": "Sarah Miller", "role": "Senior Agent", "phone": "+123 456 7891"},
                {"name": "David Chen", "role": "Buyer Specialist", "phone": "+123 456 7892"},
            ],
        }

    def _faq(self, request: GenerationRequest) -> ContentPayload:
        industry = self._industry_label(request)
        return {
            "title": "Frequently Asked Questions",
            "subtitle": "Your questions answered",
            "items": [
                {
                    "question": f"What services does {request.website_name} offer?",
                    "answer": f"We offer a comprehensive range of {industry} services tailored to your needs.",
                },
                {
                    "question": "How can I get a quote?",
                    "answer": "Contact us via the form or email and we'll get back to you shortly.",
                },
            ],
        }

    def _blog(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "Latest Articles",
            "subtitle": "Insights & tips from our team",
            "posts": [
                {
                    "title": f"How to Get Started with {request.website_name}",
                    "summary": "A step-by-step guide to help you onboard with us.",
                    "image": "/images/blog1.jpg",
                },
                {
                    "title": "5 Mistakes to Avoid in Your Project",
                    "summary": "Learn from experience and make smarter decisions.",
                    "image": "/images/blog2.jpg",
                },
            ],
        }

    def _contact(self, request: GenerationRequest) -> ContentPayload:
        return {
            "title": "Get in Touch",
            "subtitle": "We'd love to hear from you",
            "address": "123 Main Street, City, Country",
            "phone": "+123 456 7890",
            "email": "info@example.com",
        }

    def _footer(self, request: GenerationRequest) -> ContentPayload:
        return {"links": ["Privacy Policy", "Terms of Use", "Contact"]}


__all__ = ["ContentPayload", "FallbackContentGenerator"]
