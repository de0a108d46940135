"""
Starter templates offered in the generator page gallery.

Choosing a template only changes the ``template`` id that ends up in the
theme-suggestion description; there is no template-specific markup.
"""

from sitecraft.schemas.generation import DEFAULT_TEMPLATE_ID
from sitecraft.schemas.templates import TemplateOption

TEMPLATES: tuple[TemplateOption, ...] = (
    TemplateOption(
        id=DEFAULT_TEMPLATE_ID,
        name="Startup",
        description="A bold landing page for a new product or company.",
        image_url="https://picsum.photos/seed/startup/600/400",
        image_hint="startup office",
    ),
    TemplateOption(
        id="template-portfolio",
        name="Portfolio",
        description="Showcase projects and skills for a creative professional.",
        image_url="https://picsum.photos/seed/portfolio/600/400",
        image_hint="designer desk",
    ),
    TemplateOption(
        id="template-ecommerce",
        name="E-commerce",
        description="A storefront with featured products and a call to action.",
        image_url="https://picsum.photos/seed/ecommerce/600/400",
        image_hint="online shopping",
    ),
    TemplateOption(
        id="template-restaurant",
        name="Restaurant",
        description="Menu highlights, opening hours and reservations.",
        image_url="https://picsum.photos/seed/restaurant/600/400",
        image_hint="restaurant interior",
    ),
    TemplateOption(
        id="template-blog",
        name="Blog",
        description="A reading-focused layout for articles and posts.",
        image_url="https://picsum.photos/seed/blog/600/400",
        image_hint="writing notebook",
    ),
    TemplateOption(
        id="template-agency",
        name="Agency",
        description="Services, case studies and a contact form for an agency.",
        image_url="https://picsum.photos/seed/agency/600/400",
        image_hint="team meeting",
    ),
)

_BY_ID = {t.id: t for t in TEMPLATES}


def list_templates() -> list[TemplateOption]:
    return list(TEMPLATES)


def get_template(template_id: str | None) -> TemplateOption | None:
    """Return the catalog entry for *template_id*, or ``None`` if unknown."""
    if not template_id:
        return None
    return _BY_ID.get(template_id)
