"""FastAPI application entry point."""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ingreedy import __version__
from ingreedy.config import get_settings
from ingreedy.logging_config import LoggingContext, configure_logging, get_logger
from ingreedy.routers import ingredients_router

settings = get_settings()

# Configure logging on module load
configure_logging(log_level=settings.log_level, log_file=settings.log_file)
logger = get_logger(__name__)

app = FastAPI(
    title="Ingreedy API",
    description="Natural-language parsing of recipe ingredient lines",
    version=__version__,
    docs_url="/docs" if settings.is_development else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every log line of a request with its request id."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(ingredients_router)

logger.info(f"Ingreedy API {__version__} configured (environment={settings.environment})")


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "ingreedy-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Ingreedy API",
        "version": __version__,
        "docs": app.docs_url,
        "health": "/health",
    }
