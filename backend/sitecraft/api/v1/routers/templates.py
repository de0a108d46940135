from fastapi import APIRouter, HTTPException

from sitecraft.core.template_catalog import get_template, list_templates
from sitecraft.schemas.templates import TemplateOption

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("/", response_model=list[TemplateOption])
async def get_templates():
    """List the starter templates shown in the gallery."""
    return list_templates()


@router.get("/{template_id}", response_model=TemplateOption)
async def get_template_by_id(template_id: str):
    template = get_template(template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    return template
