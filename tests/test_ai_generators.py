"""
Tests for the theme suggestion and page structure steps.

Both steps run against pydantic-ai's TestModel / FunctionModel so no
provider is contacted.
"""
import pytest
from pydantic_ai.models.function import FunctionModel
from pydantic_ai.models.test import TestModel

from conftest import PAGE_ARGS, THEME_ARGS, FakeSiteModel
from sitecraft.core import ai_generators
from sitecraft.core.config import AIConfig
from sitecraft.core.errors import GenerationError
from sitecraft.schemas.generation import (
    PageStructure,
    PageStructureInput,
    ThemeSuggestion,
    ThemeSuggestionInput,
)


@pytest.fixture
def theme_input():
    return ThemeSuggestionInput(
        website_name="Nova Solutions",
        website_description="Using a template-startup template, create a website with these sections: Hero, Contact",
        branding_preferences="purple and black",
        content_style="techy",
    )


@pytest.fixture
def page_input():
    return PageStructureInput(
        website_name="Nova Solutions",
        sections="Hero, Contact",
        color_preferences="#6B21A8, #0A0A0A",
        content_style="techy",
        theme="Futuristic cyber startup",
    )


class TestSuggestThemeCustomizations:

    @pytest.mark.asyncio
    async def test_returns_structured_theme(self, theme_input):
        config = AIConfig(model=TestModel(custom_output_args=THEME_ARGS))

        theme = await ai_generators.suggest_theme_customizations(theme_input, config)

        assert isinstance(theme, ThemeSuggestion)
        assert theme.color_palette == THEME_ARGS["colorPalette"]
        assert theme.overall_theme == THEME_ARGS["overallTheme"]

    @pytest.mark.asyncio
    async def test_prompt_embeds_all_four_fields(self, theme_input):
        fake = FakeSiteModel()

        await ai_generators.suggest_theme_customizations(theme_input, AIConfig(model=FunctionModel(fake.respond)))

        assert fake.steps == ["theme"]
        prompt = fake.calls[0][1]
        assert "Website Name: Nova Solutions" in prompt
        assert f"Website Description: {theme_input.website_description}" in prompt
        assert "Branding Preferences: purple and black" in prompt
        assert "Content Style: techy" in prompt

    @pytest.mark.asyncio
    async def test_model_error_becomes_generation_error(self, theme_input):
        fake = FakeSiteModel(fail_on="theme")

        with pytest.raises(GenerationError) as exc_info:
            await ai_generators.suggest_theme_customizations(theme_input, AIConfig(model=FunctionModel(fake.respond)))

        assert exc_info.value.step == "theme"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_nonconforming_output_becomes_generation_error(self, theme_input):
        fake = FakeSiteModel(theme={"colorPalette": "#000000"})

        with pytest.raises(GenerationError):
            await ai_generators.suggest_theme_customizations(theme_input, AIConfig(model=FunctionModel(fake.respond)))

        # output retries are disabled: one round trip only
        assert fake.steps == ["theme"]

    @pytest.mark.asyncio
    async def test_temperature_is_forwarded(self, theme_input):
        fake = FakeSiteModel()
        config = AIConfig(model=FunctionModel(fake.respond), temperature=0.2)

        await ai_generators.suggest_theme_customizations(theme_input, config)

        assert fake.calls[0][2]["temperature"] == 0.2


class TestAutomatePageStructure:

    @pytest.mark.asyncio
    async def test_returns_html_and_css(self, page_input):
        config = AIConfig(model=TestModel(custom_output_args=PAGE_ARGS))

        page = await ai_generators.automate_page_structure(page_input, config)

        assert isinstance(page, PageStructure)
        assert page.html == PAGE_ARGS["html"]
        assert page.css == PAGE_ARGS["css"]

    @pytest.mark.asyncio
    async def test_prompt_embeds_all_five_fields(self, page_input):
        fake = FakeSiteModel()

        await ai_generators.automate_page_structure(page_input, AIConfig(model=FunctionModel(fake.respond)))

        prompt = fake.calls[0][1]
        assert "Website Name: Nova Solutions" in prompt
        assert "Sections: Hero, Contact" in prompt
        assert "Color Preferences: #6B21A8, #0A0A0A" in prompt
        assert "Content Style: techy" in prompt
        assert "Theme: Futuristic cyber startup" in prompt

    @pytest.mark.asyncio
    async def test_missing_css_becomes_generation_error(self, page_input):
        fake = FakeSiteModel(page={"html": "<main></main>"})

        with pytest.raises(GenerationError) as exc_info:
            await ai_generators.automate_page_structure(page_input, AIConfig(model=FunctionModel(fake.respond)))

        assert exc_info.value.step == "page_structure"

    @pytest.mark.asyncio
    async def test_model_error_becomes_generation_error(self, page_input):
        fake = FakeSiteModel(fail_on="page")

        with pytest.raises(GenerationError):
            await ai_generators.automate_page_structure(page_input, AIConfig(model=FunctionModel(fake.respond)))


def test_page_structure_instructions_are_fixed():
    """Visual-effect directives are part of the instructions, not the input."""
    prompt = ai_generators._PAGE_STRUCTURE_SYSTEM_PROMPT
    assert "semantic HTML5" in prompt
    assert "neon border" in prompt
    assert "gradient animated backgrounds" in prompt


def test_theme_instructions_require_hex_codes_and_font_names():
    prompt = ai_generators._THEME_SYSTEM_PROMPT
    assert "hex codes" in prompt
    assert "font names" in prompt
