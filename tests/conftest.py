"""
Shared fixtures: a scripted fake model backend for both pipeline steps.
"""
import pytest
from pydantic_ai import models
from pydantic_ai.messages import ModelRequest, ModelResponse, ToolCallPart, UserPromptPart
from pydantic_ai.models.function import AgentInfo, FunctionModel

from sitecraft.core.config import AIConfig
from sitecraft.schemas.generation import GenerationRequest

# Never reach a real provider from the test suite
models.ALLOW_MODEL_REQUESTS = False


THEME_ARGS = {
    "colorPalette": "#6B21A8, #0A0A0A, #22D3EE",
    "typography": "Orbitron for headlines, Inter for body",
    "iconography": "Thin line icons with neon accents",
    "visualEffects": "Glowing borders and animated gradients",
    "overallTheme": "Futuristic cyber startup",
}

PAGE_ARGS = {
    "html": "<header><h1>Nova Solutions</h1></header><main><section class=\"hero\">Hi</section></main>",
    "css": ".hero { background: linear-gradient(#6B21A8, #0A0A0A); }",
}


def user_prompt(messages) -> str:
    for message in messages:
        if isinstance(message, ModelRequest):
            for part in message.parts:
                if isinstance(part, UserPromptPart):
                    return part.content
    return ""


class FakeSiteModel:
    """Answers theme and page-structure requests with canned tool calls.

    Every call is recorded as ``(step, prompt, model_settings)`` in ``calls``.
    """

    def __init__(self, theme=None, page=None, fail_on=None):
        self.theme = THEME_ARGS if theme is None else theme
        self.page = PAGE_ARGS if page is None else page
        self.fail_on = fail_on
        self.calls = []

    def respond(self, messages, info: AgentInfo) -> ModelResponse:
        output_tool = info.output_tools[0]
        properties = output_tool.parameters_json_schema.get("properties", {})
        step = "theme" if "colorPalette" in properties else "page"
        self.calls.append((step, user_prompt(messages), info.model_settings))

        if step == self.fail_on:
            raise RuntimeError(f"{step} model unavailable")

        args = self.theme if step == "theme" else self.page
        return ModelResponse(parts=[ToolCallPart(output_tool.name, args)])

    @property
    def steps(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_model():
    return FakeSiteModel()


@pytest.fixture
def ai_config(fake_model):
    return AIConfig(model=FunctionModel(fake_model.respond))


@pytest.fixture
def nova_request():
    return GenerationRequest(
        website_name="Nova Solutions",
        sections="Hero, Features, Contact",
        color_preferences="purple and black",
        content_style="techy",
        template="template-startup",
    )
