from __future__ import annotations

from typing import Mapping

INDUSTRY_KNOWLEDGE: Mapping[str, str] = {
    "restaurant": "Restaurant websites should include: menu sections with categories, reservation system, food gallery, chef profiles, location/hours, and testimonials. Use warm colors and food imagery.",
    "technology": "Tech websites need: features grid, pricing tables, case studies, team profiles, technical specifications, and contact forms. Use modern, clean designs with blue/tech colors.",
    "realestate": "Real estate sites require: property listings with filters, virtual tours, agent profiles, mortgage calculator, neighborhood guides, and contact forms.",
    "healthcare": "Healthcare websites need: service listings, doctor/team profiles, appointment booking, FAQs, insurance info, and emergency contacts. Use clean, accessible design.",
    "fitness": "Fitness websites should include: class schedules, trainer bios, membership plans, testimonials, and photo/video gallery. Use energetic, bold visuals.",
    "beauty": "Beauty & spa sites should offer: service menus, booking system, photo gallery, pricing, and testimonials. Use soft colors and elegant design.",
    "legal": "Law firm sites need: team bios, service areas, case results/testimonials, contact forms, and FAQs. Use professional, trustworthy visuals.",
    "education": "Education & training websites should include: course catalogs, enrollment info, event calendars, faculty profiles, and student testimonials.",
    "photography": "Photography portfolios should include: galleries, project showcases, client testimonials, booking/contact form, and service pricing.",
    "business": "Consulting websites need: service descriptions, case studies, team intros, client logos/testimonials, and a strong contact CTA.",
    "ecommerce": "E-commerce sites should include: product listings with filters, shopping cart, checkout system, product pages, and reviews.",
    "travel": "Travel websites need: destination galleries, itineraries, booking system, customer reviews, and travel tips. Use vibrant, inviting visuals.",
    "construction": "Construction/architecture websites should feature: project portfolios, services, testimonials, certifications, and team bios.",
    "automotive": "Auto websites should show: services offered, photo gallery, appointment system, vehicle inventory (if sales), and contact info.",
    "fashion": "Fashion sites need: product catalogs, collections, lookbooks, size guides, reviews, and smooth shopping cart integration.",
    "finance": "Finance websites should include: services, contact forms, security disclosures, FAQs, calculators, and team bios. Use serious, secure visuals.",
    "nonprofit": "Non-profit websites should offer: mission overview, events, donation system, volunteer signup, and team introductions.",
    "eventplanning": "Event planning sites should show: past events gallery, services, testimonials, pricing/packages, and contact form.",
    "interior": "Interior design sites need: design portfolios, service packages, testimonials, about the designer/team, and contact/booking info.",
    "marketing": "Marketing & advertising sites should include: portfolio/case studies, services, testimonials, blog, and contact forms.",
}


def normalize_industry(industry_key: str | None) -> str:
    """Lower-case the key and drop spaces, dashes and underscores."""
    if not industry_key:
        return ""
    return "".join(ch for ch in industry_key.lower() if ch not in " -_")


def lookup(industry_key: str | None) -> str:
    return INDUSTRY_KNOWLEDGE.get(normalize_industry(industry_key), "")


__all__ = ["INDUSTRY_KNOWLEDGE", "lookup", "normalize_industry"]
