"""
Shared FastAPI dependencies — single source of truth for DI.

All routers should import get_ai_config from HERE; tests swap the model
backend through ``app.dependency_overrides[get_ai_config]``.
"""

from sitecraft.core.config import AIConfig
from sitecraft.core.config import get_ai_config as _build_ai_config

__all__ = ["get_ai_config"]


def get_ai_config() -> AIConfig:
    """Return the process-wide AI model configuration."""
    return _build_ai_config()
