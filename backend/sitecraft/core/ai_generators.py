"""
Two-step AI pipeline for website generation.

Agents
------
- **theme_agent**          – Suggests palette, typography, iconography and effects
- **page_structure_agent** – Writes the HTML and CSS for the page

Neither agent is bound to a model: the caller passes an ``AIConfig`` on every
run so the backend can be swapped (e.g. for a fake model in tests).
"""

import logging

from pydantic_ai import Agent

from sitecraft.core.config import AIConfig
from sitecraft.core.errors import GenerationError
from sitecraft.schemas.generation import (
    PageStructure,
    PageStructureInput,
    ThemeSuggestion,
    ThemeSuggestionInput,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# 1.  Theme suggestion agent
# ---------------------------------------------------------------------------

_THEME_SYSTEM_PROMPT = """\
You are an AI theme customization expert.  You suggest theme customizations \
for a website based on the user's description and branding preferences.

For every request suggest:

- colorPalette: a color palette for the website.
- typography: typography for the website, including headline and body fonts.
- iconography: iconography to use on the website.
- visualEffects: visual effects to enhance the website's UI.
- overallTheme: the overall theme of the website.

Rules:
- Make sure the suggestions align with the branding preferences and content \
  style.  Keep them concise and easy to understand.
- The website should be futuristic and use a purple and black theme.
- The colorPalette must contain hex codes.
- The typography must contain the font names.
"""

theme_agent = Agent(
    None,
    output_type=ThemeSuggestion,
    system_prompt=_THEME_SYSTEM_PROMPT,
    retries=0,
)


# ---------------------------------------------------------------------------
# 2.  Page structure agent
# ---------------------------------------------------------------------------

_PAGE_STRUCTURE_SYSTEM_PROMPT = """\
You are an expert web developer who specializes in semantic HTML and modular \
CSS.  Based on the user's input, generate a well-structured HTML page and the \
corresponding CSS styles.

Instructions:
1. Create an HTML structure containing the requested sections.
2. Use semantic HTML5 tags (<header>, <nav>, <main>, <article>, <footer>) \
   where appropriate.
3. Generate CSS classes that are modular and reusable.
4. Incorporate the given color preferences into the CSS.
5. Tailor both HTML and CSS to the content style (professional, casual, \
   techy, playful).
6. Keep the code clean and readable.
7. Add futuristic visual effects: gradient animated backgrounds, neon border \
   glow and smooth transitions.

Output the body markup in ``html`` (no <html>, <head> or <style> wrapper) and \
all styles in ``css``.
"""

page_structure_agent = Agent(
    None,
    output_type=PageStructure,
    system_prompt=_PAGE_STRUCTURE_SYSTEM_PROMPT,
    retries=0,
)


# ===================================================================
# Prompt builders
# ===================================================================

def build_theme_prompt(payload: ThemeSuggestionInput) -> str:
    return (
        f"Website Name: {payload.website_name}\n"
        f"Website Description: {payload.website_description}\n"
        f"Branding Preferences: {payload.branding_preferences}\n"
        f"Content Style: {payload.content_style}\n\n"
        f"Based on the information above, suggest the theme customizations."
    )


def build_page_structure_prompt(payload: PageStructureInput) -> str:
    return (
        f"Website Name: {payload.website_name}\n"
        f"Sections: {payload.sections}\n"
        f"Color Preferences: {payload.color_preferences}\n"
        f"Content Style: {payload.content_style}\n"
        f"Theme: {payload.theme}\n\n"
        f"Provide the complete HTML and CSS code."
    )


# ===================================================================
# Steps
# ===================================================================

async def suggest_theme_customizations(
    payload: ThemeSuggestionInput,
    config: AIConfig,
) -> ThemeSuggestion:
    """Ask the *theme_agent* for a theme matching the site's description.

    Parameters
    ----------
    payload:
        Website name, free-text description, branding preferences and
        content style.
    config:
        Model selection for this run.

    Raises ``GenerationError`` if the model call fails or its output does
    not match ``ThemeSuggestion``.
    """
    logger.info("Suggesting theme for %r", payload.website_name)
    try:
        result = await theme_agent.run(
            build_theme_prompt(payload),
            model=config.model,
            model_settings=config.run_settings(),
        )
    except Exception as e:
        logger.warning("Theme suggestion failed: %s", e)
        raise GenerationError(f"Theme suggestion failed: {e}", step="theme") from e
    return result.output


async def automate_page_structure(
    payload: PageStructureInput,
    config: AIConfig,
) -> PageStructure:
    """Ask the *page_structure_agent* for the page's HTML and CSS.

    Parameters
    ----------
    payload:
        Website name, sections, color preferences, content style and the
        overall theme chosen by the previous step.
    config:
        Model selection for this run.

    Raises ``GenerationError`` if the model call fails or its output does
    not match ``PageStructure``.
    """
    logger.info("Generating page structure for %r", payload.website_name)
    try:
        result = await page_structure_agent.run(
            build_page_structure_prompt(payload),
            model=config.model,
            model_settings=config.run_settings(),
        )
    except Exception as e:
        logger.warning("Page structure generation failed: %s", e)
        raise GenerationError(f"Page structure generation failed: {e}", step="page_structure") from e
    return result.output
