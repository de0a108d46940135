import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.middleware.cors import CORSMiddleware

from sitecraft.api.v1.api import router
from sitecraft.core.config import settings
from sitecraft.core.errors import GenerationError
from sitecraft.core.generator_page import render_generator_page
from sitecraft.core.template_catalog import list_templates

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: configure logging for the service."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("%s starting in %s mode", settings.PROJECT_NAME, settings.MODE.value)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)


# ── Exception Handlers ────────────────────────────────────────

@app.exception_handler(GenerationError)
async def generation_exception_handler(request: Request, exc: GenerationError):
    return JSONResponse(status_code=502, content={"detail": exc.message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# ── Middleware ────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ───────────────────────────────────────────────────

app.include_router(router, prefix=settings.API_V1_STR)


# ── Page / Health ─────────────────────────────────────────────

@app.get("/", response_class=HTMLResponse)
def read_root():
    return render_generator_page(list_templates(), settings.API_V1_STR, settings.PROJECT_NAME)


@app.get("/health")
def health():
    return {"status": "healthy"}


def run():
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("sitecraft.main:app", host="127.0.0.1", port=8000)
