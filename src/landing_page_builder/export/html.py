"""HTML/CSS export of an assembled website."""

from __future__ import annotations

import html
from typing import Any, Callable, Iterator, Mapping, Sequence

from pydantic import BaseModel, Field

from ..models.section import Section
from ..models.website import Website, WebsiteSettings

# Asset key -> name used when the URL has no last path segment.
ASSET_KEYS = {"imageUrl": "image.jpg", "backgroundImage": "background.jpg"}


class ExportedAsset(BaseModel):
    name: str
    url: str
    type: str = "image"


class ExportedWebsite(BaseModel):
    html: str
    css: str
    assets: Sequence[ExportedAsset] = Field(default_factory=list)


def export_to_html_css(website: Website, settings: WebsiteSettings | None = None) -> ExportedWebsite:
    """Render ``website`` as a standalone HTML document plus its stylesheet.

    Sections are emitted by ascending ``order``; equal orders keep their
    original relative position. Never raises for missing or malformed props.
    """
    settings = settings or website.settings
    ordered = sorted(website.sections, key=lambda section: section.order)

    css = generate_css(settings)
    body = "\n".join(generate_section_html(section) for section in ordered)
    if not any(section.type == "SimpleFooter" for section in ordered):
        body = f"{body}\n{_site_footer(website)}" if body else _site_footer(website)

    metadata = website.metadata
    document = "\n".join(
        [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '  <meta charset="UTF-8">',
            '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"  <title>{_escape(metadata.title)}</title>",
            f'  <meta name="description" content="{_escape(metadata.description)}">',
            "  <style>",
            css,
            "  </style>",
            '  <link rel="preconnect" href="https://fonts.googleapis.com">',
            '  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>',
            f'  <link href="{_escape(google_fonts_url(settings))}" rel="stylesheet">',
            "</head>",
            "<body>",
            body,
            "</body>",
            "</html>",
        ]
    )
    return ExportedWebsite(html=document, css=css, assets=collect_assets(ordered))


def google_fonts_url(settings: WebsiteSettings) -> str:
    heading = settings.typography.heading_font.replace(" ", "+")
    body = settings.typography.body_font.replace(" ", "+")
    return f"https://fonts.googleapis.com/css2?family={heading}&family={body}&display=swap"


def generate_css(settings: WebsiteSettings) -> str:
    colors = settings.color_scheme
    typography = settings.typography
    return CSS_TEMPLATE.format(
        primary=colors.primary,
        secondary=colors.secondary,
        accent=colors.accent,
        background=colors.background,
        text=colors.text,
        heading_font=typography.heading_font,
        body_font=typography.body_font,
        base_font_size=typography.base_font_size,
    )


def collect_assets(sections: Sequence[Section]) -> list[ExportedAsset]:
    assets: list[ExportedAsset] = []
    for section in sections:
        for key, url in _find_asset_urls(section.props):
            name = url.split("/")[-1] or ASSET_KEYS[key]
            assets.append(ExportedAsset(name=name, url=url))
    return assets


def _find_asset_urls(value: Any) -> Iterator[tuple[str, str]]:
    if isinstance(value, Mapping):
        for key, item in value.items():
            if key in ASSET_KEYS and isinstance(item, str) and item:
                yield key, item
            elif isinstance(item, (Mapping, list, tuple)):
                yield from _find_asset_urls(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _find_asset_urls(item)


def generate_section_html(section: Section) -> str:
    renderer = SECTION_RENDERERS.get(section.type)
    if renderer is None:
        return (
            '<section><div class="container">'
            f"<p>Unknown section type: {_escape(section.type)}</p>"
            "</div></section>"
        )
    return renderer(section.props)


def _escape(value: Any) -> str:
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def _text(props: Mapping[str, Any], key: str, default: str = "") -> str:
    value = props.get(key)
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return _escape(value)
    return _escape(default)


def _items(props: Mapping[str, Any], key: str) -> list[Any]:
    value = props.get(key)
    return list(value) if isinstance(value, (list, tuple)) else []


def _field(item: Any, key: str, default: str = "") -> str:
    if isinstance(item, Mapping):
        return _text(item, key, default)
    if isinstance(item, str) and key in ("title", "name", "label"):
        return _escape(item)
    return _escape(default)


def _style(props: Mapping[str, Any]) -> str:
    background = _text(props, "backgroundColor")
    color = _text(props, "textColor")
    rules = []
    if background:
        rules.append(f"background-color: {background};")
    if color:
        rules.append(f"color: {color};")
    return f' style="{" ".join(rules)}"' if rules else ""


def _heading(props: Mapping[str, Any], default: str, level: int = 2) -> str:
    title = _text(props, "title", default)
    subtitle = _text(props, "subtitle")
    parts = [f"<h{level}>{title}</h{level}>"] if title else []
    if subtitle:
        parts.append(f'<p class="subtitle">{subtitle}</p>')
    return "".join(parts)


def _cards(
    css_class: str,
    props: Mapping[str, Any],
    key: str,
    default_title: str,
    render_card: Callable[[Any], str],
) -> str:
    cards = "".join(render_card(item) for item in _items(props, key))
    return (
        f'<section class="{css_class}"{_style(props)}><div class="container">'
        f"{_heading(props, default_title)}"
        f'<div class="card-grid">{cards}</div>'
        "</div></section>"
    )


def _render_header(props: Mapping[str, Any]) -> str:
    links = []
    for item in _items(props, "menu"):
        if isinstance(item, Mapping):
            label = _field(item, "label")
            link = _field(item, "link", "#")
        else:
            label = _escape(item)
            link = f"#{_escape(str(item).strip().lower().replace(' ', '-'))}"
        links.append(f'<li><a href="{link}">{label}</a></li>')
    return (
        f"<header{_style(props)}><div class=\"container\">"
        f'<div class="logo"><h1>{_text(props, "logo", "Logo")}</h1></div>'
        f"<nav><ul>{''.join(links)}</ul></nav>"
        "</div></header>"
    )


def _render_hero(props: Mapping[str, Any]) -> str:
    buttons = []
    primary = _text(props, "primaryButton") or _text(props, "buttonText")
    if primary:
        buttons.append(f'<a href="{_text(props, "buttonLink", "#")}" class="btn">{primary}</a>')
    secondary = _text(props, "secondaryButton")
    if secondary:
        buttons.append(f'<a href="#about" class="btn btn-secondary">{secondary}</a>')
    description = _text(props, "description")
    return (
        f'<section class="hero hero-{_text(props, "variant", "centered")}"{_style(props)}>'
        '<div class="container">'
        f'<h1>{_text(props, "title", "Welcome")}</h1>'
        f'<p>{_text(props, "subtitle")}</p>'
        + (f'<p class="description">{description}</p>' if description else "")
        + "".join(buttons)
        + "</div></section>"
    )


def _render_about(props: Mapping[str, Any]) -> str:
    image = _text(props, "image")
    return (
        f'<section class="about" id="about"{_style(props)}><div class="container">'
        f"{_heading(props, 'About Us')}"
        f'<p>{_text(props, "description")}</p>'
        + (f'<img src="{image}" alt="{_text(props, "title", "About")}">' if image else "")
        + "</div></section>"
    )


def _render_menu(props: Mapping[str, Any]) -> str:
    blocks = []
    for category in _items(props, "categories"):
        entries = "".join(
            f'<li><span>{_field(item, "name")}</span><span class="price">{_field(item, "price")}</span></li>'
            for item in (_items(category, "items") if isinstance(category, Mapping) else [])
        )
        blocks.append(f'<div class="menu-category"><h3>{_field(category, "category")}</h3><ul>{entries}</ul></div>')
    return (
        f'<section class="menu"{_style(props)}><div class="container">'
        f'<h2>{_text(props, "title", "Our Menu")}</h2>'
        f"{''.join(blocks)}"
        "</div></section>"
    )


def _render_gallery(props: Mapping[str, Any]) -> str:
    images = []
    for image in _items(props, "images"):
        if isinstance(image, Mapping):
            src = _field(image, "url") or _field(image, "imageUrl")
        else:
            src = _escape(image)
        if src:
            images.append(f'<img src="{src}" alt="">')
    return (
        f'<section class="gallery"{_style(props)}><div class="container">'
        f"{_heading(props, 'Gallery')}"
        f'<div class="gallery-grid">{"".join(images)}</div>'
        "</div></section>"
    )


def _render_titled_card(item: Any) -> str:
    return (
        '<div class="card">'
        f'<h3>{_field(item, "title")}</h3>'
        f'<p>{_field(item, "description") or _field(item, "summary")}</p>'
        "</div>"
    )


def _render_testimonial(item: Any) -> str:
    quote = _field(item, "quote") or _field(item, "content")
    return (
        '<blockquote class="card">'
        f"<p>{quote}</p>"
        f'<cite>{_field(item, "name")}<span>{_field(item, "role")}</span></cite>'
        "</blockquote>"
    )


def _render_person(item: Any) -> str:
    return f'<div class="card"><h3>{_field(item, "name")}</h3><p>{_field(item, "role")}</p></div>'


def _render_plan(item: Any) -> str:
    features = _items(item, "features") if isinstance(item, Mapping) else []
    entries = "".join(f"<li>{_escape(feature)}</li>" for feature in features)
    return (
        '<div class="card pricing-plan">'
        f'<h3>{_field(item, "name")}</h3>'
        f'<p class="price">{_field(item, "price")}</p>'
        f"<ul>{entries}</ul>"
        "</div>"
    )


def _render_listing(item: Any) -> str:
    image = _field(item, "imageUrl")
    return (
        '<div class="card listing">'
        + (f'<img src="{image}" alt="{_field(item, "title")}">' if image else "")
        + f'<h3>{_field(item, "title")}</h3>'
        f'<p class="price">{_field(item, "price")}</p>'
        "</div>"
    )


def _render_area(item: Any) -> str:
    return f'<div class="card"><h3>{_field(item, "name")}</h3><p>{_field(item, "description")}</p></div>'


def _render_faq_item(item: Any) -> str:
    return f'<details class="card"><summary>{_field(item, "question")}</summary><p>{_field(item, "answer")}</p></details>'


def _render_search(props: Mapping[str, Any]) -> str:
    return (
        f'<section class="search"{_style(props)}><div class="container">'
        f'<form><input type="search" placeholder="{_text(props, "placeholder", "Search...")}">'
        '<button type="submit" class="btn">Search</button></form>'
        "</div></section>"
    )


def _render_contact(props: Mapping[str, Any]) -> str:
    details = []
    for key, label in (("address", "Address"), ("phone", "Phone"), ("email", "Email")):
        value = _text(props, key)
        if value:
            details.append(f"<li><strong>{label}:</strong> {value}</li>")
    return (
        f'<section class="contact" id="contact"{_style(props)}><div class="container">'
        f"{_heading(props, 'Contact Us')}"
        f"<ul>{''.join(details)}</ul>"
        '<form><input type="text" name="name" placeholder="Name">'
        '<input type="email" name="email" placeholder="Email">'
        '<textarea name="message" placeholder="Message"></textarea>'
        '<button type="submit" class="btn">Send</button></form>'
        "</div></section>"
    )


def _render_footer(props: Mapping[str, Any]) -> str:
    links = "".join(f'<li><a href="#">{_escape(link)}</a></li>' for link in _items(props, "links"))
    return (
        f"<footer{_style(props)}><div class=\"container\">"
        f"<ul>{links}</ul>"
        f'<p>{_text(props, "copyright")}</p>'
        "</div></footer>"
    )


def _render_generic(props: Mapping[str, Any]) -> str:
    return (
        f'<section class="generic"{_style(props)}><div class="container">'
        f'<h2>{_text(props, "title")}</h2>'
        f'<p>{_text(props, "description")}</p>'
        "</div></section>"
    )


def _site_footer(website: Website) -> str:
    generated_at = website.metadata.generated_at
    year = f"{generated_at.year} " if generated_at else ""
    return (
        '<footer><div class="container">'
        f"<p>&copy; {year}{_escape(website.metadata.title)}. All rights reserved.</p>"
        "</div></footer>"
    )


SECTION_RENDERERS: Mapping[str, Callable[[Mapping[str, Any]], str]] = {
    "SimpleHeader": _render_header,
    "AdaptiveHero": _render_hero,
    "AboutSection": _render_about,
    "InteractiveMenu": _render_menu,
    "ImageGallery": _render_gallery,
    "TestimonialsSlider": lambda props: _cards("testimonials", props, "items", "Testimonials", _render_testimonial),
    "ServiceCards": lambda props: _cards("services", props, "items", "Our Services", _render_titled_card),
    "FeatureGrid": lambda props: _cards("features", props, "items", "Features", _render_titled_card),
    "CaseStudyShowcase": lambda props: _cards("case-studies", props, "cases", "Case Studies", _render_titled_card),
    "TeamGrid": lambda props: _cards("team", props, "members", "Our Team", _render_person),
    "PricingTable": lambda props: _cards("pricing", props, "plans", "Pricing", _render_plan),
    "SearchBar": _render_search,
    "ListingCards": lambda props: _cards("listings", props, "listings", "Featured Listings", _render_listing),
    "NeighborhoodOverview": lambda props: _cards("neighborhoods", props, "areas", "Neighborhoods", _render_area),
    "AgentProfiles": lambda props: _cards("agents", props, "agents", "Our Agents", _render_person),
    "FAQAccordion": lambda props: _cards("faq", props, "items", "FAQ", _render_faq_item),
    "BlogPosts": lambda props: _cards("blog", props, "posts", "Latest Articles", _render_titled_card),
    "ContactForm": _render_contact,
    "SimpleFooter": _render_footer,
    "GenericSection": _render_generic,
}


CSS_TEMPLATE = """    :root {{
      --color-primary: {primary};
      --color-secondary: {secondary};
      --color-accent: {accent};
      --color-background: {background};
      --color-text: {text};
      --font-heading: "{heading_font}", sans-serif;
      --font-body: "{body_font}", sans-serif;
      --font-size-base: {base_font_size};
    }}

    * {{
      box-sizing: border-box;
      margin: 0;
      padding: 0;
    }}

    body {{
      font-family: var(--font-body);
      font-size: var(--font-size-base);
      color: var(--color-text);
      background-color: var(--color-background);
      line-height: 1.6;
    }}

    h1, h2, h3, h4, h5, h6 {{
      font-family: var(--font-heading);
      margin-bottom: 1rem;
      line-height: 1.2;
    }}

    a {{
      color: var(--color-primary);
      text-decoration: none;
    }}

    a:hover {{
      text-decoration: underline;
    }}

    .container {{
      width: 100%;
      max-width: 1200px;
      margin: 0 auto;
      padding: 0 1rem;
    }}

    .btn {{
      display: inline-block;
      padding: 0.5rem 1.5rem;
      background-color: var(--color-primary);
      color: white;
      border: none;
      border-radius: 4px;
      cursor: pointer;
      font-family: var(--font-body);
      font-weight: 600;
      text-align: center;
    }}

    .btn-secondary {{
      background-color: var(--color-secondary);
    }}

    section {{
      padding: 4rem 0;
    }}

    .subtitle {{
      color: var(--color-accent);
      margin-bottom: 2rem;
    }}

    header {{
      box-shadow: 0 2px 10px rgba(0, 0, 0, 0.1);
      padding: 1rem 0;
    }}

    header .container {{
      display: flex;
      justify-content: space-between;
      align-items: center;
    }}

    header nav ul {{
      display: flex;
      list-style: none;
    }}

    header nav ul li {{
      margin-left: 1.5rem;
    }}

    .hero {{
      text-align: center;
      padding: 6rem 0;
    }}

    .hero h1 {{
      font-size: 3rem;
    }}

    .hero p {{
      font-size: 1.25rem;
      max-width: 800px;
      margin: 0 auto 2rem;
    }}

    .card-grid, .gallery-grid {{
      display: grid;
      grid-template-columns: repeat(auto-fit, minmax(280px, 1fr));
      gap: 2rem;
    }}

    .card {{
      padding: 2rem;
      border-radius: 8px;
      box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
    }}

    .gallery-grid img, .about img, .listing img {{
      width: 100%;
      border-radius: 8px;
    }}

    footer {{
      padding: 2rem 0;
      text-align: center;
    }}

    footer ul {{
      display: flex;
      justify-content: center;
      gap: 1.5rem;
      list-style: none;
      margin-bottom: 1rem;
    }}

    @media (max-width: 768px) {{
      .hero h1 {{
        font-size: 2.5rem;
      }}

      .card-grid, .gallery-grid {{
        grid-template-columns: 1fr;
      }}
    }}
"""


__all__ = [
    "ExportedAsset",
    "ExportedWebsite",
    "collect_assets",
    "export_to_html_css",
    "generate_css",
    "generate_section_html",
    "google_fonts_url",
]
