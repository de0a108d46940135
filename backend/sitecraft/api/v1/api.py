"""API v1 — aggregates all routers under a single prefix."""

from fastapi import APIRouter

from sitecraft.api.v1.routers import generation, templates

router = APIRouter()
router.include_router(generation.router)
router.include_router(templates.router)
