import logging

from sitecraft.core import ai_generators
from sitecraft.core.config import AIConfig
from sitecraft.core.errors import GENERATION_FAILED_MESSAGE, GenerationError
from sitecraft.schemas.generation import (
    GeneratedSite,
    GenerationRequest,
    PageStructureInput,
    ThemeSuggestionInput,
)

logger = logging.getLogger(__name__)


def build_website_description(template: str | None, sections: str) -> str:
    return f"Using a {template or 'custom'} template, create a website with these sections: {sections}"


async def generate_website(request: GenerationRequest, config: AIConfig) -> GeneratedSite:
    """Run theme suggestion, then page structure, and return the finished site.

    The second step is fed the palette and overall theme from the first, not
    the user's raw color preferences.  Any failure aborts the whole run with
    a single ``GenerationError``; nothing partial is returned.
    """
    try:
        theme = await ai_generators.suggest_theme_customizations(
            ThemeSuggestionInput(
                website_name=request.website_name,
                website_description=build_website_description(request.template, request.sections),
                branding_preferences=request.color_preferences,
                content_style=request.content_style,
            ),
            config,
        )

        page = await ai_generators.automate_page_structure(
            PageStructureInput(
                website_name=request.website_name,
                sections=request.sections,
                color_preferences=theme.color_palette,
                content_style=request.content_style,
                theme=theme.overall_theme,
            ),
            config,
        )

        if not page.html.strip() or not page.css.strip():
            raise GenerationError("AI failed to return complete code.", step="page_structure")

        # the pipeline has no script-generation step
        return GeneratedSite(html=page.html, css=page.css, js="")

    except Exception as e:
        logger.error("AI generation error (step=%s): %s", getattr(e, "step", None) or "orchestrator", e, exc_info=True)
        raise GenerationError(GENERATION_FAILED_MESSAGE) from e
