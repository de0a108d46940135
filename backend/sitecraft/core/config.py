from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from pydantic import field_validator
from pydantic_ai.models import Model
from pydantic_ai.settings import ModelSettings
from pydantic_settings import BaseSettings, SettingsConfigDict


class ModeEnum(str, Enum):
    development = "development"
    production = "production"
    testing = "testing"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file="../.env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── App ───────────────────────────────────────────────────
    MODE: ModeEnum = ModeEnum.production
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "SITECRAFT"
    LOG_LEVEL: str = "INFO"

    # ── CORS ──────────────────────────────────────────────────
    ALLOWED_ORIGINS: list[str] = [
        "http://localhost:8000",
        "http://localhost:3000",
        "http://127.0.0.1:8000",
        "http://127.0.0.1:3000",
    ]

    # ── AI model ──────────────────────────────────────────────
    OPENAI_API_KEY: str = ""
    AI_MODEL: str = "openai:gpt-4o-mini"
    AI_TEMPERATURE: float | None = None

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


settings = Settings()


@dataclass(frozen=True)
class AIConfig:
    """Model selection handed explicitly to every generation step.

    ``model`` is either a pydantic-ai ``Model`` instance or a
    ``"provider:model-name"`` string that pydantic-ai resolves on first use.
    """

    model: Model | str
    temperature: float | None = None

    def run_settings(self) -> ModelSettings | None:
        if self.temperature is None:
            return None
        return ModelSettings(temperature=self.temperature)


def build_ai_config(config: Settings) -> AIConfig:
    """Build the :class:`AIConfig` described by *config*.

    When an OpenAI key is configured the model is bound to it explicitly,
    otherwise the model name is passed through and the provider falls back
    to its own environment lookup.
    """
    model: Model | str = config.AI_MODEL
    provider_name, _, model_name = config.AI_MODEL.partition(":")
    if config.OPENAI_API_KEY and provider_name == "openai" and model_name:
        from pydantic_ai.models.openai import OpenAIChatModel
        from pydantic_ai.providers.openai import OpenAIProvider

        model = OpenAIChatModel(
            model_name,
            provider=OpenAIProvider(api_key=config.OPENAI_API_KEY),
        )
    return AIConfig(model=model, temperature=config.AI_TEMPERATURE)


@lru_cache
def get_ai_config() -> AIConfig:
    return build_ai_config(settings)
