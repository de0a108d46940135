"""Generation router — thin HTTP layer, delegates all logic to generation_controller."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from sitecraft.api.deps import get_ai_config
from sitecraft.controllers import generation_controller
from sitecraft.core.config import AIConfig
from sitecraft.core.preview_template import PREVIEW_CSP, build_preview_document
from sitecraft.schemas.generation import GeneratedSite, GenerationRequest

router = APIRouter(tags=["generation"])


@router.post("/generate", response_model=GeneratedSite)
async def generate_website(
    payload: GenerationRequest,
    config: AIConfig = Depends(get_ai_config),
):
    """Run the theme → page structure pipeline and return the generated code."""
    return await generation_controller.generate_website(payload, config)


@router.post("/preview", response_class=HTMLResponse)
async def preview_website(payload: GeneratedSite):
    """Compose html, css and js into a single document for the preview frame."""
    return HTMLResponse(
        content=build_preview_document(payload),
        headers={"Content-Security-Policy": PREVIEW_CSP},
    )
