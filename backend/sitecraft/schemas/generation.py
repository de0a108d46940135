"""
Request / response shapes for the two-step website generation pipeline.

Attributes are snake_case in Python; on the wire (API JSON and the
structured-output schema the model sees) every field uses its camelCase
alias, e.g. ``website_name`` ⇄ ``websiteName``.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ContentStyle = Literal["professional", "casual", "techy", "playful"]

DEFAULT_TEMPLATE_ID = "template-startup"

WEBSITE_NAME_MIN_LENGTH = 2
SECTIONS_MIN_LENGTH = 10
COLOR_PREFERENCES_MIN_LENGTH = 5


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Form input ────────────────────────────────────────────────

class GenerationRequest(CamelModel):
    model_config = ConfigDict(frozen=True)

    website_name: str = Field(min_length=WEBSITE_NAME_MIN_LENGTH)
    sections: str = Field(min_length=SECTIONS_MIN_LENGTH)
    color_preferences: str = Field(min_length=COLOR_PREFERENCES_MIN_LENGTH)
    content_style: ContentStyle
    template: str | None = DEFAULT_TEMPLATE_ID


# Shown next to the offending field by the generator page.
VALIDATION_MESSAGES = {
    "websiteName": "Website name must be at least 2 characters.",
    "sections": "Please describe the sections you want (e.g., hero, features, contact).",
    "colorPreferences": "Please describe your color preferences (e.g., dark theme with blue accents).",
    "contentStyle": "Please choose professional, casual, techy or playful.",
}


# ── Step 1: theme suggestion ──────────────────────────────────

class ThemeSuggestionInput(CamelModel):
    website_name: str
    website_description: str
    branding_preferences: str
    content_style: str


class ThemeSuggestion(CamelModel):
    color_palette: str = Field(description="A suggested color palette for the website, as hex codes.")
    typography: str = Field(description="Suggested typography, including headline and body font names.")
    iconography: str = Field(description="Suggestions for iconography to use on the website.")
    visual_effects: str = Field(description="Suggested visual effects to enhance the website's UI.")
    overall_theme: str = Field(description="An overall theme suggestion based on the input.")


# ── Step 2: page structure ────────────────────────────────────

class PageStructureInput(CamelModel):
    website_name: str
    sections: str
    color_preferences: str
    content_style: ContentStyle
    theme: str


class PageStructure(CamelModel):
    html: str = Field(description="Generated HTML structure for the website.")
    css: str = Field(description="Generated CSS styles for the website.")


# ── Result ────────────────────────────────────────────────────

class GeneratedSite(CamelModel):
    html: str
    css: str
    js: str = ""
