import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from resume_extractor.api.routes.parse import router as parse_router
from resume_extractor.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"

app = FastAPI(
    title="Resume Extractor",
    description="Turns DOCX/PDF/TXT resumes into structured data with local, deterministic heuristics",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(parse_router)


@app.get("/", tags=["health"])
def root():
    return {
        "service": "resume-extractor",
        "version": API_VERSION,
        "status": "running",
        "endpoints": ["/parse", "/health", "/docs"],
    }


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}


def custom_openapi():
    """OpenAPI schema with tag descriptions, built once and cached on the app."""
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title="Resume Extractor API",
        version=API_VERSION,
        description="Heuristic resume-to-structured-data extraction",
        routes=app.routes,
        tags=[
            {"name": "parse", "description": "Upload a resume and get structured data back"},
            {"name": "health", "description": "Liveness checks"},
        ],
    )
    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi
logger.info("Resume extractor ready (min_text_length=%d)", settings.min_text_length)
