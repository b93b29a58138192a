"""FastAPI application for the Lift Progress engine."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .api.routes import progress
from .api.exception_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info(f"Starting Lift Progress API v{__version__}")
    if settings.record_store_url:
        logger.info(f"Record store: {settings.record_store_url}")
    else:
        logger.info(f"Data directory: {settings.data_dir}")
    yield
    logger.info("Shutting down Lift Progress API")


app = FastAPI(
    title="Lift Progress API",
    description="Strength training progress analytics",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(progress.router, prefix="/api/v1/progress", tags=["progress"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Lift Progress API",
        "version": __version__,
        "status": "healthy",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
